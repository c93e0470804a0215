"""Unit tests for the source fetcher with cache fallback."""

from pathlib import Path

import httpx
import pytest

from county_risk.lib.fetcher.fetcher import (
    FetchError,
    PayloadOrigin,
    fetch_source,
    fetch_source_result,
    write_cache,
)

URL = "https://data.example.com/source.json"


class TestFetchSuccess:
    """Tests for the network path."""

    def test_returns_network_bytes(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, content=b'{"data": []}')
        cache = tmp_path / "cache.json"

        result = fetch_source_result(URL, cache, label="epi")

        assert result.payload == b'{"data": []}'
        assert result.origin == PayloadOrigin.NETWORK
        assert result.from_cache is False
        assert result.status_code == 200

    def test_overwrites_cache_with_network_bytes(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, content=b"fresh")
        cache = tmp_path / "cache.json"
        cache.write_bytes(b"stale")

        fetch_source(URL, cache)

        assert cache.read_bytes() == b"fresh"

    def test_strips_leading_bom(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, content=b"\xef\xbb\xbf{}")
        cache = tmp_path / "cache.json"

        payload = fetch_source(URL, cache)

        assert payload == b"{}"
        assert cache.read_bytes() == b"{}"

    def test_creates_cache_directory(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, content=b"{}")
        cache = tmp_path / "nested" / "dir" / "cache.json"

        fetch_source(URL, cache)

        assert cache.read_bytes() == b"{}"
        assert not cache.with_suffix(".json.part").exists()


class TestFetchFallback:
    """Tests for falling back to the cached copy."""

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_non_success_status_uses_cache(self, tmp_path: Path, httpx_mock, status: int) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, status_code=status, content=b"error page")
        cache = tmp_path / "cache.json"
        cache.write_bytes(b'{"cached": true}')

        result = fetch_source_result(URL, cache)

        assert result.payload == b'{"cached": true}'
        assert result.origin == PayloadOrigin.CACHE
        assert result.status_code == status
        assert cache.read_bytes() == b'{"cached": true}'

    def test_connect_error_uses_cache(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_exception(httpx.ConnectError("connection refused"), url=URL)
        cache = tmp_path / "cache.json"
        cache.write_bytes(b"cached")

        result = fetch_source_result(URL, cache)

        assert result.payload == b"cached"
        assert result.from_cache is True
        assert result.status_code is None

    def test_timeout_uses_cache(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_exception(httpx.ReadTimeout("too slow"), url=URL)
        cache = tmp_path / "cache.json"
        cache.write_bytes(b"cached")

        assert fetch_source(URL, cache, timeout=0.5) == b"cached"

    def test_cached_bom_is_kept(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, status_code=500)
        cache = tmp_path / "cache.json"
        cache.write_bytes(b"\xef\xbb\xbf{}")

        assert fetch_source(URL, cache) == b"\xef\xbb\xbf{}"

    def test_missing_cache_raises_fetch_error(self, tmp_path: Path, httpx_mock) -> None:  # type: ignore[no-untyped-def]
        httpx_mock.add_response(url=URL, status_code=404)
        cache = tmp_path / "missing.json"

        with pytest.raises(FetchError, match="epidemiological") as exc_info:
            fetch_source(URL, cache, label="epidemiological")

        assert exc_info.value.label == "epidemiological"
        assert exc_info.value.url == URL
        assert exc_info.value.cache_path == cache
        assert not cache.exists()


class TestWriteCache:
    """Tests for write_cache()."""

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        cache = tmp_path / "cache.json"
        cache.write_bytes(b"old")

        write_cache(cache, b"new")

        assert cache.read_bytes() == b"new"
        assert list(tmp_path.iterdir()) == [cache]
