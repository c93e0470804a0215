"""Field conversions for loosely typed source values.

Both sources encode numbers inconsistently: identifiers as zero-padded
text, counts as text with a suppression sentinel, percentages as text with
a ``" %"`` suffix. Each parser here raises ``ValueError`` on text it cannot
read; the engine decides what to substitute and records the issue.
"""

import math
import re

SUPPRESSED_COUNT_SENTINEL = "<20"
SUPPRESSED_COUNT_VALUE = 10
NOT_CALCULATED_SENTINEL = "Not Calculated"
SQ_MILES_TO_SQ_KM = 2.59

_COUNTY_WORD_RE = re.compile(r"(^| )County\b")
_PERCENT_SUFFIX = " %"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int_text(value: str) -> int:
    """Parse a plain decimal integer: optional sign, digits only.

    Raises:
        ValueError: For anything else (blanks, separators, decimals, spaces).
    """
    if not _INTEGER_RE.fullmatch(value):
        msg = f"not an integer: {value!r}"
        raise ValueError(msg)
    return int(value)


def parse_fips(value: str) -> int:
    """Convert a text FIPS code (``"06037"``) to its integer value.

    Raises:
        ValueError: If the text is not a decimal integer.
    """
    return parse_int_text(value)


def parse_count(value: str) -> int:
    """Parse a case or death count, honoring the ``"<20"`` sentinel.

    Raises:
        ValueError: If the text is neither the sentinel nor an integer.
    """
    if value == SUPPRESSED_COUNT_SENTINEL:
        return SUPPRESSED_COUNT_VALUE
    return parse_int_text(value)


def parse_percent(value: str) -> float:
    """Parse a percent-of-state value such as ``"1.25 %"``.

    ``"Not Calculated"`` yields 0.0.

    Raises:
        ValueError: If the remaining text is not a finite plain decimal
            (no whitespace, underscores, ``nan`` or ``inf``).
    """
    if value == NOT_CALCULATED_SENTINEL:
        return 0.0
    text = value.replace(_PERCENT_SUFFIX, "")
    if not _DECIMAL_RE.fullmatch(text):
        msg = f"not a decimal: {value!r}"
        raise ValueError(msg)
    result = float(text)
    if not math.isfinite(result):
        msg = f"not a finite decimal: {value!r}"
        raise ValueError(msg)
    return result


def normalize_county_name(name: str) -> str:
    """Remove every whole word ``County``, with its leading space when it has one.

    ``"Jefferson County"`` becomes ``"Jefferson"`` and ``"County County"``
    becomes ``""``; words that merely start with ``County`` are kept.
    """
    return _COUNTY_WORD_RE.sub("", name)


def sq_miles_to_sq_km(area: int | float) -> int:
    """Convert square miles to square kilometers, truncated toward zero."""
    return int(area * SQ_MILES_TO_SQ_KM)


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero.

    Raises:
        ZeroDivisionError: If ``denominator`` is zero.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient
