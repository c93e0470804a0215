"""Exporter library — public API for joined county export.

Writes the same ordered collection to a JSON document and a CSV file
using one shared column contract.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from county_risk.lib.exporter.columns import COLUMNS, HEADER, Column, ColumnKind, county_to_dict, county_to_row
from county_risk.lib.exporter.atomic import discard_part, part_path_for, write_part
from county_risk.lib.exporter.csv_writer import render_csv, write_csv
from county_risk.lib.exporter.json_writer import read_json, render_json, write_json
from county_risk.lib.joiner.types import JoinedCounty


class ExportError(Exception):
    """Raised when an output file cannot be written."""

    def __init__(self, message: str, *, path: Path):
        super().__init__(message)
        self.path = path


@dataclass
class ExportResult:
    """Result of an export operation."""

    record_count: int
    json_path: Path
    csv_path: Path
    json_size_bytes: int
    csv_size_bytes: int


def export_counties(counties: Sequence[JoinedCounty], json_path: Path, csv_path: Path) -> ExportResult:
    """Export joined counties to both sinks.

    Both documents are rendered and staged beside their targets before either
    target is replaced, so a failure to write one output leaves the other
    output from the previous run in place.

    Args:
        counties: Joined counties, in output order.
        json_path: Structured output path.
        csv_path: Tabular output path.

    Returns:
        ExportResult with record count and file sizes.

    Raises:
        ExportError: If either file cannot be written.
    """
    outputs = ((json_path, render_json(counties)), (csv_path, render_csv(counties)))
    staged: list[Path] = []
    current = json_path
    try:
        for current, text in outputs:
            write_part(current, text)
            staged.append(current)
        while staged:
            current = staged[0]
            part_path_for(current).replace(current)
            staged.pop(0)
    except OSError as exc:
        for path in staged:
            discard_part(path)
        msg = f"Failed to write {current}: {exc}"
        logger.error(msg)
        raise ExportError(msg, path=current) from exc

    result = ExportResult(
        record_count=len(counties),
        json_path=json_path,
        csv_path=csv_path,
        json_size_bytes=json_path.stat().st_size,
        csv_size_bytes=csv_path.stat().st_size,
    )
    logger.info("Exported {} counties to {} and {}", result.record_count, json_path, csv_path)
    return result


__all__ = [
    "COLUMNS",
    "HEADER",
    "Column",
    "ColumnKind",
    "ExportError",
    "ExportResult",
    "county_to_dict",
    "county_to_row",
    "export_counties",
    "read_json",
    "render_csv",
    "render_json",
    "write_csv",
    "write_json",
]
