"""Typer CLI app definition."""

import typer
from pydantic import ValidationError

from county_risk.core.config import get_settings
from county_risk.core.logging import setup_logging

app = typer.Typer(name="county-risk", help="U.S. county case/death risk metrics")


@app.callback()
def _main_callback() -> None:
    """Load settings and initialize logging for all CLI commands."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Error loading configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI commands."""
    from county_risk.cli.run_cmd import run

    app.command("run")(run)


_register_subcommands()
