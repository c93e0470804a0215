"""Join & derive engine — match the two sources by FIPS and compute risk metrics.

Public API:
    - join_counties: join parsed demographic and epidemiological records
    - derive_county: build one JoinedCounty from a matched pair
    - JoinedCounty / JoinResult / JoinReport: output types
"""

from county_risk.lib.joiner.conversions import (
    NOT_CALCULATED_SENTINEL,
    SQ_MILES_TO_SQ_KM,
    SUPPRESSED_COUNT_SENTINEL,
    SUPPRESSED_COUNT_VALUE,
    normalize_county_name,
    parse_count,
    parse_fips,
    parse_percent,
    sq_miles_to_sq_km,
    trunc_div,
)
from county_risk.lib.joiner.engine import compute_risk_index, derive_county, join_counties
from county_risk.lib.joiner.types import (
    FieldIssue,
    JoinedCounty,
    JoinReport,
    JoinResult,
    SkippedRecord,
)

__all__ = [
    "NOT_CALCULATED_SENTINEL",
    "SQ_MILES_TO_SQ_KM",
    "SUPPRESSED_COUNT_SENTINEL",
    "SUPPRESSED_COUNT_VALUE",
    "FieldIssue",
    "JoinReport",
    "JoinResult",
    "JoinedCounty",
    "SkippedRecord",
    "compute_risk_index",
    "derive_county",
    "join_counties",
    "normalize_county_name",
    "parse_count",
    "parse_fips",
    "parse_percent",
    "sq_miles_to_sq_km",
    "trunc_div",
]
