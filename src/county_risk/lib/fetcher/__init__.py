"""Fetcher library — retrieve a remote source document with cache fallback.

Public API:
    - fetch_source: single HTTP GET returning the payload bytes
    - fetch_source_result: same, plus whether the payload came from cache
    - FetchResult: payload + origin
    - FetchError: unrecoverable fetch failure (no network payload, no cache)
"""

from county_risk.lib.fetcher.fetcher import (
    FetchError,
    FetchResult,
    PayloadOrigin,
    fetch_source,
    fetch_source_result,
    write_cache,
)

__all__ = [
    "FetchError",
    "FetchResult",
    "PayloadOrigin",
    "fetch_source",
    "fetch_source_result",
    "write_cache",
]
