"""County risk pipeline: fetch both sources, join them, export the result.

A single call performs one complete pass. Fatal conditions surface as the
library exceptions (FetchError, ParseError, ExportError); everything the
join could not use is collected in the returned summary's JoinReport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from county_risk.core.logging import run_summary_logger
from county_risk.lib.exporter import ExportResult, export_counties
from county_risk.lib.fetcher import FetchResult, fetch_source_result
from county_risk.lib.joiner import JoinedCounty, JoinReport, join_counties
from county_risk.lib.parsers import parse_demographic_document, parse_epi_document
from county_risk.lib.parsers.demographic import DEMOGRAPHIC_LABEL
from county_risk.lib.parsers.epi import EPI_LABEL

if TYPE_CHECKING:
    from county_risk.core.config import Settings


@dataclass
class RunSummary:
    """Outcome of one pipeline run.

    Attributes:
        counties: Joined counties, in output order.
        report: Join report (unmatched, skipped, coerced fields).
        export: Export result for both sinks.
        cached_sources: Labels of sources served from the local cache.
    """

    counties: list[JoinedCounty]
    report: JoinReport
    export: ExportResult
    cached_sources: list[str] = field(default_factory=list)


def _fetch(label: str, url: str, cache_path: str, timeout: float) -> FetchResult:
    return fetch_source_result(url, Path(cache_path), timeout=timeout, label=label)


def run_pipeline(settings: Settings) -> RunSummary:
    """Run fetch → parse → join → export once.

    Args:
        settings: Source URLs, cache and output paths, timeout.

    Returns:
        RunSummary describing the run.

    Raises:
        FetchError: If a source is unavailable and has no cache.
        ParseError: If a source document cannot be decoded.
        ExportError: If an output file cannot be written.
    """
    epi_fetch = _fetch(EPI_LABEL, settings.epi_source_url, settings.epi_cache_path, settings.fetch_timeout)
    demo_fetch = _fetch(
        DEMOGRAPHIC_LABEL,
        settings.demographic_source_url,
        settings.demographic_cache_path,
        settings.fetch_timeout,
    )

    epi_records = parse_epi_document(epi_fetch.payload)
    demo_records = parse_demographic_document(demo_fetch.payload)

    joined = join_counties(demo_records, epi_records)

    export = export_counties(joined.counties, Path(settings.risk_json_path), Path(settings.risk_csv_path))

    cached = [label for label, result in ((EPI_LABEL, epi_fetch), (DEMOGRAPHIC_LABEL, demo_fetch)) if result.from_cache]
    summary = RunSummary(counties=joined.counties, report=joined.report, export=export, cached_sources=cached)

    report = joined.report
    run_summary_logger().info(
        "run complete",
        joined=len(joined.counties),
        unmatched_demographic=len(report.unmatched_demographic),
        unmatched_epi=len(report.unmatched_epi),
        skipped=len(report.skipped),
        parse_issues=len(report.parse_issues),
        cached_sources=cached,
    )
    return summary
