"""Fixtures for exporter tests."""

import pytest

from county_risk.lib.joiner.types import JoinedCounty


@pytest.fixture
def counties() -> list[JoinedCounty]:
    """Two joined counties in output order."""
    return [
        JoinedCounty(
            name="Los Angeles",
            state="California",
            state_code="CA",
            fips=6037,
            population=10000000,
            area=2590,
            density=3861,
            cases=1200,
            deaths=10,
            percent_of_state=12.5,
            cases_by_population=12,
            cases_by_area=463,
            deaths_by_population=0,
            deaths_by_area=3,
            risk_index=0.52,
        ),
        JoinedCounty(
            name="O'Brien, North",
            state="Iowa",
            state_code="IA",
            fips=19141,
            population=14000,
            area=1484,
            density=9,
            cases=10,
            deaths=0,
            percent_of_state=0.0,
            cases_by_population=71,
            cases_by_area=6,
            deaths_by_population=0,
            deaths_by_area=0,
            risk_index=0.72,
        ),
    ]
