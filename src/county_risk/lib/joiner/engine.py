"""Join demographic and epidemiological records and derive risk metrics.

Records are matched by integer FIPS equality. For each demographic record,
in document order, every epidemiological record with the same identifier
yields one output row, in epidemiological document order. Records without
a counterpart are reported, not raised.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence
from typing import TypeVar

from loguru import logger

from county_risk.lib.joiner.conversions import (
    normalize_county_name,
    parse_count,
    parse_fips,
    parse_percent,
    sq_miles_to_sq_km,
    trunc_div,
)
from county_risk.lib.joiner.types import FieldIssue, JoinedCounty, JoinReport, JoinResult, SkippedRecord
from county_risk.lib.parsers.demographic import DEMOGRAPHIC_LABEL, DemoRecord
from county_risk.lib.parsers.epi import EPI_LABEL, EpiRecord

T = TypeVar("T")


def _parse_or_zero(
    parse: Callable[[str], T],
    raw: str,
    zero: T,
    *,
    source: str,
    field: str,
    fips: str,
    report: JoinReport | None,
) -> T:
    """Apply a field parser, substituting ``zero`` and recording the failure."""
    try:
        return parse(raw)
    except ValueError:
        logger.warning("Unparseable {} field {}={!r} (fips {}); using {}", source, field, raw, fips, zero)
        if report is not None:
            report.parse_issues.append(FieldIssue(source=source, field=field, raw_value=raw, fips=fips))
        return zero


def compute_risk_index(deaths_by_area: int, cases_by_population: int) -> float:
    """Combine the two rates into the risk index.

    Both rates are offset by one so the product is never zero; the result
    keeps two decimal places.
    """
    return round((deaths_by_area + 1) * (cases_by_population + 1) * 100) / 10000


def derive_county(demo: DemoRecord, epi: EpiRecord, report: JoinReport | None = None) -> JoinedCounty | None:
    """Build the joined county for one matched pair.

    Args:
        demo: Demographic record.
        epi: Epidemiological record with the same FIPS.
        report: Optional report collecting parse issues and skips.

    Returns:
        The JoinedCounty, or None when converted area or population is zero.
    """
    fips_text = str(epi.fips)
    name = normalize_county_name(epi.county_name)
    area = sq_miles_to_sq_km(demo.area)
    population = demo.population

    if area == 0 or population == 0:
        reason = "zero area" if area == 0 else "zero population"
        logger.warning("Skipping {} (fips {}): {}", name, epi.fips, reason)
        if report is not None:
            report.skipped.append(SkippedRecord(fips=epi.fips, name=name, reason=reason))
        return None

    cases = _parse_or_zero(
        parse_count, epi.cases, 0, source=EPI_LABEL, field="cases", fips=fips_text, report=report
    )
    deaths = _parse_or_zero(
        parse_count, epi.deaths, 0, source=EPI_LABEL, field="deaths", fips=fips_text, report=report
    )
    percent = _parse_or_zero(
        parse_percent, epi.cases_percent, 0.0, source=EPI_LABEL, field="cases_percent", fips=fips_text, report=report
    )

    cases_by_population = trunc_div(cases * 100000, population)
    cases_by_area = trunc_div(cases * 1000, area)
    deaths_by_population = trunc_div(deaths * 100000, population)
    deaths_by_area = trunc_div(deaths * 1000, area)

    return JoinedCounty(
        name=name,
        state=demo.state,
        state_code=epi.state,
        fips=epi.fips,
        population=population,
        area=area,
        density=trunc_div(population, area),
        cases=cases,
        deaths=deaths,
        percent_of_state=percent,
        cases_by_population=cases_by_population,
        cases_by_area=cases_by_area,
        deaths_by_population=deaths_by_population,
        deaths_by_area=deaths_by_area,
        risk_index=compute_risk_index(deaths_by_area, cases_by_population),
    )


def join_counties(demographic: Sequence[DemoRecord], epi: Sequence[EpiRecord]) -> JoinResult:
    """Join the two parsed datasets by FIPS.

    Args:
        demographic: Demographic records, in output order.
        epi: Epidemiological records.

    Returns:
        A JoinResult with the ordered counties and the join report.
    """
    result = JoinResult()
    report = result.report

    by_fips: dict[int, list[EpiRecord]] = defaultdict(list)
    for record in epi:
        by_fips[record.fips].append(record)
    matched_fips: set[int] = set()

    for demo in demographic:
        fips = _parse_or_zero(
            parse_fips, demo.fips, 0, source=DEMOGRAPHIC_LABEL, field="fips", fips=demo.fips, report=report
        )
        matches = by_fips.get(fips)
        if not matches:
            report.unmatched_demographic.append(demo.fips)
            continue

        matched_fips.add(fips)
        for match in matches:
            county = derive_county(demo, match, report)
            if county is not None:
                result.counties.append(county)

    report.unmatched_epi = [record.fips for record in epi if record.fips not in matched_fips]

    logger.info(
        "Joined {} counties ({} demographic, {} epidemiological records)",
        len(result.counties),
        len(demographic),
        len(epi),
    )
    if report.unmatched_demographic or report.unmatched_epi:
        logger.warning(
            "Unmatched records: {} demographic, {} epidemiological",
            len(report.unmatched_demographic),
            len(report.unmatched_epi),
        )
    return result
