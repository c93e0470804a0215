"""CSV writer for joined county data."""

import csv
import io
from collections.abc import Iterable, Sequence
from pathlib import Path

from loguru import logger

from county_risk.lib.exporter.atomic import atomic_write_text
from county_risk.lib.exporter.columns import HEADER, county_to_row
from county_risk.lib.joiner.types import JoinedCounty


def render_csv(counties: Iterable[JoinedCounty]) -> str:
    """Render counties as CSV text with a header row and LF line endings."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)

    for county in counties:
        row = county_to_row(county)
        logger.debug("CSV row: {}", row)
        writer.writerow(row)

    return buffer.getvalue()


def write_csv(output_path: Path, counties: Sequence[JoinedCounty]) -> int:
    """Write counties to a CSV file with a fixed header row.

    Args:
        output_path: Path to write the CSV file.
        counties: Joined counties, in output order.

    Returns:
        Number of data rows written.
    """
    atomic_write_text(output_path, render_csv(counties))
    return len(counties)
