"""Epidemiological county feed parser.

The feed is a top-level object whose ``data`` array holds one record per
county. Every field is text except ``fips``; counts may carry the ``"<20"``
suppression sentinel and the percentage may read ``"Not Calculated"``, so
numeric conversion is left to the join engine.
"""

from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from county_risk.lib.parsers.errors import ParseError, coerce_null_to_int, coerce_null_to_str, load_json

EPI_LABEL = "epidemiological"


class EpiRecord(BaseModel):
    """A single county row from the epidemiological feed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    county_name: str = ""
    state: str = ""
    fips: int = 0
    cases: str = ""
    deaths: str = ""
    cases_percent: str = ""
    rate_per_100k: str = ""

    @field_validator("county_name", "state", "cases", "deaths", "cases_percent", "rate_per_100k", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return coerce_null_to_str(v)

    @field_validator("fips", mode="before")
    @classmethod
    def _coerce_fips(cls, v: Any) -> Any:
        return coerce_null_to_int(v)


class EpiFeed(BaseModel):
    """Top-level epidemiological document."""

    model_config = ConfigDict(extra="ignore")

    data: list[EpiRecord] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_data(cls, v: Any) -> Any:
        return v if v is not None else []


def parse_epi_document(raw: bytes | str | dict) -> list[EpiRecord]:
    """Parse the epidemiological feed into records, in document order.

    Args:
        raw: Raw JSON bytes/text, or an already-decoded dict.

    Returns:
        List of EpiRecord.

    Raises:
        ParseError: If the document is not valid JSON or has the wrong shape.
    """
    data = load_json(raw, EPI_LABEL)
    if not isinstance(data, dict):
        msg = f"{EPI_LABEL}: expected a JSON object with a 'data' array, got {type(data).__name__}"
        raise ParseError(msg, label=EPI_LABEL)

    try:
        feed = EpiFeed.model_validate(data)
    except ValidationError as exc:
        msg = f"{EPI_LABEL}: invalid document structure: {exc}"
        raise ParseError(msg, label=EPI_LABEL) from exc

    logger.info("Parsed {} {} records", len(feed.data), EPI_LABEL)
    return feed.data
