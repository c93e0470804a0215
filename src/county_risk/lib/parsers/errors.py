"""Errors and shared decoding helpers for the dataset parsers."""

import json
from typing import Any

_UTF8_BOM = b"\xef\xbb\xbf"


class ParseError(Exception):
    """Raised when a whole source document cannot be decoded."""

    def __init__(self, message: str, *, label: str):
        super().__init__(message)
        self.label = label


def load_json(raw: bytes | str | dict | list, label: str) -> Any:
    """Decode raw JSON bytes/text, passing already-decoded objects through.

    Raises:
        ParseError: If the payload is not valid JSON.
    """
    if isinstance(raw, dict | list):
        return raw
    if isinstance(raw, bytes):
        raw = raw.removeprefix(_UTF8_BOM)
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        msg = f"{label}: invalid JSON document: {exc}"
        raise ParseError(msg, label=label) from exc


def coerce_null_to_str(v: Any) -> Any:
    """Coerce explicit JSON null to empty string."""
    return v if v is not None else ""


def coerce_null_to_int(v: Any) -> Any:
    """Coerce explicit JSON null to 0."""
    return v if v is not None else 0
