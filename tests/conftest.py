"""Shared test fixtures: sample source documents, settings, and logging reset."""

import json
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from county_risk.core.config import Settings

EPI_URL = "https://epi.example.com/county-map-data.json"
DEMO_URL = "https://demo.example.com/counties.json"


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """Restore a plain stderr sink after tests that reconfigure Loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def epi_document() -> dict[str, Any]:
    """Epidemiological feed with sentinels, an unknown field and an unmatched county."""
    return {
        "data": [
            {
                "county_name": "Los Angeles County",
                "state": "CA",
                "fips": 6037,
                "cases": "1200",
                "deaths": "<20",
                "cases_percent": "12.5 %",
                "rate_per_100k": "12",
                "updated": "2020-04-01",
            },
            {
                "county_name": "Jefferson County",
                "state": "AL",
                "fips": 1073,
                "cases": "<20",
                "deaths": "3",
                "cases_percent": "Not Calculated",
                "rate_per_100k": "1.5",
            },
            {
                "county_name": "Nowhere County",
                "state": "ZZ",
                "fips": 99999,
                "cases": "5",
                "deaths": "0",
                "cases_percent": "0 %",
                "rate_per_100k": "0",
            },
        ]
    }


@pytest.fixture
def demographic_document() -> dict[str, Any]:
    """Demographic document keyed by county name, with one unmatched county."""
    return {
        "Los Angeles": {
            "name": "Los Angeles",
            "state": "California",
            "fips": "06037",
            "population": 10000000,
            "area": 1000,
            "density": 2500,
        },
        "Jefferson": {
            "name": "Jefferson",
            "state": "Alabama",
            "fips": "01073",
            "population": 650000,
            "area": 100,
            "density": 590,
            "land_area": 99,
        },
        "Orphan": {
            "name": "Orphan",
            "state": "Nowhere",
            "fips": "88888",
            "population": 100,
            "area": 10,
            "density": 10,
        },
    }


@pytest.fixture
def epi_bytes(epi_document: dict[str, Any]) -> bytes:
    return json.dumps(epi_document).encode("utf-8")


@pytest.fixture
def demographic_bytes(demographic_document: dict[str, Any]) -> bytes:
    return json.dumps(demographic_document).encode("utf-8")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing caches and outputs into a temporary directory."""
    return Settings(
        _env_file=None,
        epi_source_url=EPI_URL,
        demographic_source_url=DEMO_URL,
        epi_cache_path=str(tmp_path / "cache" / "CDC.json"),
        demographic_cache_path=str(tmp_path / "cache" / "Github.json"),
        risk_json_path=str(tmp_path / "out" / "risk.json"),
        risk_csv_path=str(tmp_path / "out" / "risk.csv"),
        fetch_timeout=5.0,
    )
