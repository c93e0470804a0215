"""Source document HTTP client with local cache fallback.

Each source is fetched with a single GET and an explicit timeout. When the
network copy is unavailable the last payload written to the cache file is
used instead. Whatever bytes end up being used are written back to the
cache, so the cache always holds the last successfully used payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import httpx
from loguru import logger

_UTF8_BOM = b"\xef\xbb\xbf"


class FetchError(Exception):
    """Raised when a source can be neither downloaded nor read from cache."""

    def __init__(self, message: str, *, label: str, url: str, cache_path: Path):
        super().__init__(message)
        self.label = label
        self.url = url
        self.cache_path = cache_path


class PayloadOrigin(StrEnum):
    """Where a fetched payload came from."""

    NETWORK = "network"
    CACHE = "cache"


@dataclass(frozen=True)
class FetchResult:
    """Payload bytes used for parsing and their origin.

    Attributes:
        payload: Raw document bytes (BOM already stripped for network copies).
        origin: Whether the payload was downloaded or read from the cache file.
        status_code: HTTP status of the network attempt, or None on transport error.
    """

    payload: bytes
    origin: PayloadOrigin
    status_code: int | None = None

    @property
    def from_cache(self) -> bool:
        return self.origin == PayloadOrigin.CACHE


def _download(url: str, timeout: float) -> tuple[bytes | None, int | None]:
    """Attempt one GET. Returns (body, status); body is None on any failure."""
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            logger.debug("Fetching {}", url)
            response = client.get(url)
    except httpx.TimeoutException as exc:
        logger.warning("Timeout fetching {}: {}", url, exc)
        return None, None
    except httpx.HTTPError as exc:
        logger.warning("HTTP error fetching {}: {}", url, exc)
        return None, None

    if not response.is_success:
        logger.warning("HTTP {} fetching {}", response.status_code, url)
        return None, response.status_code
    return response.content, response.status_code


def write_cache(cache_path: Path, payload: bytes) -> None:
    """Overwrite the cache file atomically via a ``.part`` temporary file.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    cache_path.parent.mkdir(parents=True, exist_ok=True)
    part_path = cache_path.with_suffix(cache_path.suffix + ".part")
    try:
        part_path.write_bytes(payload)
        part_path.replace(cache_path)
    except OSError:
        part_path.unlink(missing_ok=True)
        raise


def fetch_source_result(
    url: str,
    cache_path: Path,
    *,
    timeout: float = 30.0,
    label: str = "source",
) -> FetchResult:
    """Fetch a source document, falling back to the cached copy.

    Args:
        url: Remote document URL.
        cache_path: Local cache file read on fallback and rewritten afterwards.
        timeout: HTTP timeout in seconds.
        label: Human-readable source name used in logs and errors.

    Returns:
        A FetchResult with the payload and its origin.

    Raises:
        FetchError: If the download failed and the cache cannot be read.
    """
    body, status = _download(url, timeout)

    if body is not None:
        payload = body.removeprefix(_UTF8_BOM)
        origin = PayloadOrigin.NETWORK
        logger.info("Fetched {} ({} bytes) from {}", label, len(payload), url)
    else:
        try:
            payload = cache_path.read_bytes()
        except OSError as exc:
            msg = f"{label}: download from {url} failed and cache {cache_path} is unreadable: {exc}"
            logger.error(msg)
            raise FetchError(msg, label=label, url=url, cache_path=cache_path) from exc
        origin = PayloadOrigin.CACHE
        logger.warning("Using cached {} from {} ({} bytes)", label, cache_path, len(payload))

    try:
        write_cache(cache_path, payload)
    except OSError as exc:
        logger.error("Could not write cache {} for {}: {}", cache_path, label, exc)

    return FetchResult(payload=payload, origin=origin, status_code=status)


def fetch_source(
    url: str,
    cache_path: Path,
    *,
    timeout: float = 30.0,
    label: str = "source",
) -> bytes:
    """Fetch a source document and return only the payload bytes.

    See :func:`fetch_source_result` for the fallback rules.
    """
    return fetch_source_result(url, cache_path, timeout=timeout, label=label).payload
