"""CLI command for one fetch → join → export pass.

``county-risk run`` downloads both source documents (falling back to the
local cache), joins them by FIPS, writes the JSON and CSV outputs and
prints a summary of anything that could not be joined.
"""

from __future__ import annotations

import typer

from county_risk.lib.exporter import ExportError
from county_risk.lib.fetcher import FetchError
from county_risk.lib.parsers import ParseError


def run() -> None:
    """Fetch both sources, join them and export risk metrics."""
    from county_risk.core.config import get_settings
    from county_risk.services.risk_service import run_pipeline

    settings = get_settings()

    try:
        summary = run_pipeline(settings)
    except FetchError as exc:
        typer.echo(f"Error fetching {exc.label} source: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except ParseError as exc:
        typer.echo(f"Error parsing {exc.label} source: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except ExportError as exc:
        typer.echo(f"Error writing output {exc.path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    report = summary.report
    typer.echo(f"Joined counties:           {len(summary.counties)}")
    typer.echo(f"Unmatched demographic:     {len(report.unmatched_demographic)}")
    typer.echo(f"Unmatched epidemiological: {len(report.unmatched_epi)}")
    typer.echo(f"Skipped (zero area/pop):   {len(report.skipped)}")
    typer.echo(f"Field parse issues:        {len(report.parse_issues)}")
    if summary.cached_sources:
        typer.echo(f"Served from cache:         {', '.join(summary.cached_sources)}")
    typer.echo(f"JSON output:               {summary.export.json_path}")
    typer.echo(f"CSV output:                {summary.export.csv_path}")
