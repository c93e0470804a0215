"""Ordered field contract shared by the JSON and CSV writers.

Both sinks enumerate ``COLUMNS`` so field order, labels and formatting are
defined in exactly one place.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from operator import attrgetter
from typing import Any

from county_risk.lib.joiner.types import JoinedCounty


class ColumnKind(StrEnum):
    """Value type of a column, which determines its CSV formatting."""

    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"


@dataclass(frozen=True)
class Column:
    """One exported field.

    Attributes:
        label: CSV header label.
        key: JSON object key.
        attr: JoinedCounty attribute name.
        kind: Value type.
    """

    label: str
    key: str
    attr: str
    kind: ColumnKind

    @property
    def extract(self) -> Callable[[JoinedCounty], Any]:
        return attrgetter(self.attr)

    def format_cell(self, county: JoinedCounty) -> str:
        """Render this column's value for a CSV cell."""
        value = self.extract(county)
        if self.kind == ColumnKind.DECIMAL:
            return f"{value:.2f}"
        if self.kind == ColumnKind.INTEGER:
            return f"{value:d}"
        return value


COLUMNS: tuple[Column, ...] = (
    Column("Name", "Name", "name", ColumnKind.TEXT),
    Column("State", "State", "state", ColumnKind.TEXT),
    Column("State Code", "StateCode", "state_code", ColumnKind.TEXT),
    Column("Fips", "Fips", "fips", ColumnKind.INTEGER),
    Column("Population", "Population", "population", ColumnKind.INTEGER),
    Column("Area", "Area", "area", ColumnKind.INTEGER),
    Column("Density", "Density", "density", ColumnKind.INTEGER),
    Column("Cases", "Cases", "cases", ColumnKind.INTEGER),
    Column("Deaths", "Deaths", "deaths", ColumnKind.INTEGER),
    Column("Percent Of State", "PercentOfState", "percent_of_state", ColumnKind.DECIMAL),
    Column("Cases By Population", "CasesByPopulation", "cases_by_population", ColumnKind.INTEGER),
    Column("Cases By Area", "CasesByArea", "cases_by_area", ColumnKind.INTEGER),
    Column("Deaths By Population", "DeathsByPopulation", "deaths_by_population", ColumnKind.INTEGER),
    Column("Deaths By Area", "DeathsByArea", "deaths_by_area", ColumnKind.INTEGER),
    Column("Risk Index", "RiskIndex", "risk_index", ColumnKind.DECIMAL),
)

HEADER: list[str] = [column.label for column in COLUMNS]


def county_to_row(county: JoinedCounty) -> list[str]:
    """Render a county as CSV cells in column order."""
    return [column.format_cell(county) for column in COLUMNS]


def county_to_dict(county: JoinedCounty) -> dict[str, Any]:
    """Render a county as a JSON object with keys in column order."""
    return {column.key: column.extract(county) for column in COLUMNS}


def county_from_dict(data: dict[str, Any]) -> JoinedCounty:
    """Rebuild a county from a JSON object produced by :func:`county_to_dict`.

    Raises:
        KeyError: If a column key is missing.
    """
    values: dict[str, Any] = {}
    for column in COLUMNS:
        value = data[column.key]
        if column.kind == ColumnKind.DECIMAL:
            value = float(value)
        values[column.attr] = value
    return JoinedCounty(**values)
