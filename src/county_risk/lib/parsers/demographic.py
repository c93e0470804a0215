"""Demographic county document parser.

The document maps an opaque name key to a county record. The key is not
used downstream; the embedded ``fips`` text is the join key. Output keeps
the document's key order.
"""

from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, RootModel, ValidationError, field_validator

from county_risk.lib.parsers.errors import ParseError, coerce_null_to_int, coerce_null_to_str, load_json

DEMOGRAPHIC_LABEL = "demographic"


class DemoRecord(BaseModel):
    """A single county entry from the demographic document.

    ``density`` is carried for completeness only; the join engine
    recomputes it from population and converted area.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    state: str = ""
    fips: str = ""
    population: int = 0
    area: int = 0
    density: int = 0

    @field_validator("name", "state", "fips", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return coerce_null_to_str(v)

    @field_validator("population", "area", "density", mode="before")
    @classmethod
    def _coerce_numbers(cls, v: Any) -> Any:
        return coerce_null_to_int(v)


class DemographicDocument(RootModel[dict[str, DemoRecord]]):
    """Top-level demographic document: opaque key → record."""


def parse_demographic_document(raw: bytes | str | dict) -> list[DemoRecord]:
    """Parse the demographic document into records, in document order.

    Args:
        raw: Raw JSON bytes/text, or an already-decoded dict.

    Returns:
        List of DemoRecord.

    Raises:
        ParseError: If the document is not valid JSON or has the wrong shape.
    """
    data = load_json(raw, DEMOGRAPHIC_LABEL)
    if not isinstance(data, dict):
        msg = f"{DEMOGRAPHIC_LABEL}: expected a JSON object keyed by county, got {type(data).__name__}"
        raise ParseError(msg, label=DEMOGRAPHIC_LABEL)

    try:
        document = DemographicDocument.model_validate(data)
    except ValidationError as exc:
        msg = f"{DEMOGRAPHIC_LABEL}: invalid document structure: {exc}"
        raise ParseError(msg, label=DEMOGRAPHIC_LABEL) from exc

    records = list(document.root.values())
    logger.info("Parsed {} {} records", len(records), DEMOGRAPHIC_LABEL)
    return records
