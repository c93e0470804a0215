"""JSON writer and reader for joined county data."""

import json
from collections.abc import Iterable, Sequence
from pathlib import Path

from county_risk.lib.exporter.atomic import atomic_write_text
from county_risk.lib.exporter.columns import county_from_dict, county_to_dict
from county_risk.lib.joiner.types import JoinedCounty


def render_json(counties: Iterable[JoinedCounty]) -> str:
    """Render counties as a tab-indented JSON array with a trailing newline."""
    records = [county_to_dict(county) for county in counties]
    return json.dumps(records, indent="\t", ensure_ascii=False, allow_nan=False) + "\n"


def write_json(output_path: Path, counties: Sequence[JoinedCounty]) -> int:
    """Write counties to a tab-indented JSON array.

    Args:
        output_path: Path to write the JSON file.
        counties: Joined counties, in output order.

    Returns:
        Number of records written.
    """
    atomic_write_text(output_path, render_json(counties))
    return len(counties)


def read_json(input_path: Path) -> list[JoinedCounty]:
    """Read counties back from a file written by :func:`write_json`.

    Raises:
        ValueError: If the file is not a JSON array of county objects.
    """
    data = json.loads(input_path.read_text(encoding="utf-8"))
    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"{input_path}: expected a JSON array, got {type(data).__name__}"
        raise ValueError(msg)
    try:
        return [county_from_dict(item) for item in data]
    except (KeyError, TypeError) as exc:
        msg = f"{input_path}: invalid county record: {exc}"
        raise ValueError(msg) from exc
