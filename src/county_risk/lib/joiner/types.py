"""Data types for the join & derive engine.

Defines the joined county entity and the per-run report that accounts for
every input record that did not become an output row.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class JoinedCounty:
    """One county present in both sources, with derived metrics.

    Attributes:
        name: County name with every ``" County"`` removed.
        state: Full state name (demographic source).
        state_code: Two-letter state code (epidemiological source).
        fips: Numeric county identifier (join key).
        population: Resident population.
        area: Land area in square kilometers, truncated.
        density: Population per square kilometer, truncated.
        cases: Case count (``"<20"`` counted as 10).
        deaths: Death count (``"<20"`` counted as 10).
        percent_of_state: County share of state cases, in percent.
        cases_by_population: Cases per 100,000 residents.
        cases_by_area: Cases per 1,000 km².
        deaths_by_population: Deaths per 100,000 residents.
        deaths_by_area: Deaths per 1,000 km².
        risk_index: Composite score, always >= 0.01 for non-negative counts.
    """

    name: str
    state: str
    state_code: str
    fips: int
    population: int
    area: int
    density: int
    cases: int
    deaths: int
    percent_of_state: float
    cases_by_population: int
    cases_by_area: int
    deaths_by_population: int
    deaths_by_area: int
    risk_index: float


@dataclass(frozen=True)
class FieldIssue:
    """A source field that could not be parsed and was replaced by zero.

    Attributes:
        source: Which dataset the field came from.
        field: Field name in the source document.
        raw_value: The unparseable text.
        fips: Identifier of the record, as text, for tracing.
    """

    source: str
    field: str
    raw_value: str
    fips: str


@dataclass(frozen=True)
class SkippedRecord:
    """A matched pair that produced no output row."""

    fips: int
    name: str
    reason: str


@dataclass
class JoinReport:
    """Accounting of input records that did not become output rows.

    Attributes:
        unmatched_demographic: Demographic FIPS values with no epidemiological match.
        unmatched_epi: Epidemiological FIPS values never matched.
        skipped: Matched pairs dropped for zero area or zero population.
        parse_issues: Fields coerced to zero because they could not be parsed.
    """

    unmatched_demographic: list[str] = field(default_factory=list)
    unmatched_epi: list[int] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)
    parse_issues: list[FieldIssue] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Whether anything was dropped or coerced."""
        return bool(self.unmatched_demographic or self.unmatched_epi or self.skipped or self.parse_issues)


@dataclass
class JoinResult:
    """Ordered joined counties plus the run's join report."""

    counties: list[JoinedCounty] = field(default_factory=list)
    report: JoinReport = field(default_factory=JoinReport)
