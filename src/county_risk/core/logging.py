"""Loguru logging configuration.

Two kinds of records flow through the pipeline: diagnostics (fetch fallbacks,
field parse issues, skipped counties) and the single end-of-run summary.
Diagnostics go to a human-readable stderr sink; the summary is emitted as one
serialized JSON line so that schedulers and log shippers can pick it up. With
a ``log_dir`` both are also persisted: diagnostics to a rotating
``county-risk.log`` and summaries appended to ``run-summary.jsonl``.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

RUN_SUMMARY_KEY = "run_summary"
DIAGNOSTIC_LOG_NAME = "county-risk.log"
RUN_SUMMARY_LOG_NAME = "run-summary.jsonl"

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def _is_run_summary(record: dict[str, Any]) -> bool:
    return bool(record["extra"].get(RUN_SUMMARY_KEY, False))


def _is_diagnostic(record: dict[str, Any]) -> bool:
    return not _is_run_summary(record)


def run_summary_logger():
    """Return a logger whose records are routed to the run-summary sinks only."""
    return logger.bind(**{RUN_SUMMARY_KEY: True})


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum level for diagnostic records.  Run summaries are
            emitted at INFO and always kept unless the level is above INFO.
        log_dir: Optional directory for log files.  When set, diagnostics go
            to a file rotated every 24 hours and retained 7 days, and run
            summaries are appended to a JSON-lines file.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=_is_diagnostic)
    logger.add(sys.stderr, level=level, serialize=True, filter=_is_run_summary)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / DIAGNOSTIC_LOG_NAME,
            level=level,
            format=_LOG_FORMAT,
            filter=_is_diagnostic,
            rotation="24h",
            retention="7 days",
        )
        logger.add(
            log_path / RUN_SUMMARY_LOG_NAME,
            level=level,
            serialize=True,
            filter=_is_run_summary,
        )
