"""Unit tests for source field conversions."""

import pytest

from county_risk.lib.joiner.conversions import (
    normalize_county_name,
    parse_count,
    parse_fips,
    parse_percent,
    sq_miles_to_sq_km,
    trunc_div,
)


class TestParseCount:
    """Tests for parse_count()."""

    def test_suppressed_sentinel_is_ten(self) -> None:
        assert parse_count("<20") == 10

    @pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("1234", 1234), ("+7", 7), ("-3", -3), ("007", 7)])
    def test_plain_integers(self, raw: str, expected: int) -> None:
        assert parse_count(raw) == expected

    @pytest.mark.parametrize("raw", ["", " 12", "1,234", "12.0", "1_000", "<10", "n/a"])
    def test_rejects_non_integers(self, raw: str) -> None:
        with pytest.raises(ValueError, match="not an integer"):
            parse_count(raw)


class TestParsePercent:
    """Tests for parse_percent()."""

    def test_not_calculated_is_zero(self) -> None:
        assert parse_percent("Not Calculated") == 0.0

    def test_strips_percent_suffix(self) -> None:
        assert parse_percent("12.5 %") == 12.5

    def test_plain_number(self) -> None:
        assert parse_percent("3") == 3.0

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_percent("unknown %")

    @pytest.mark.parametrize(("raw", "expected"), [("-0.5 %", -0.5), (".5 %", 0.5), ("1e2 %", 100.0), ("4. %", 4.0)])
    def test_plain_decimal_forms(self, raw: str, expected: float) -> None:
        assert parse_percent(raw) == expected

    @pytest.mark.parametrize("raw", ["NaN %", "nan", "inf", "-Infinity %", " 1.5", "1.5 ", "1_2.5", "1e999 %", "", " %"])
    def test_rejects_non_finite_and_loose_text(self, raw: str) -> None:
        with pytest.raises(ValueError, match="decimal"):
            parse_percent(raw)


class TestParseFips:
    """Tests for parse_fips()."""

    def test_zero_padded_text(self) -> None:
        assert parse_fips("06037") == 6037

    def test_rejects_non_numeric(self) -> None:
        with pytest.raises(ValueError):
            parse_fips("06-037")


class TestNormalizeCountyName:
    """Tests for normalize_county_name()."""

    def test_strips_suffix(self) -> None:
        assert normalize_county_name("Jefferson County") == "Jefferson"

    def test_strips_every_occurrence(self) -> None:
        assert normalize_county_name("County County") == ""

    def test_leaves_other_names(self) -> None:
        assert normalize_county_name("Orleans Parish") == "Orleans Parish"
        assert normalize_county_name("Countyville") == "Countyville"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("County", ""),
            ("County of Kauai", " of Kauai"),
            ("Jefferson County County", "Jefferson"),
            ("Jefferson Countyline", "Jefferson Countyline"),
            ("Prince George's County", "Prince George's"),
        ],
    )
    def test_whole_word_only(self, raw: str, expected: str) -> None:
        assert normalize_county_name(raw) == expected


class TestAreaAndDivision:
    """Tests for sq_miles_to_sq_km() and trunc_div()."""

    def test_area_conversion_truncates(self) -> None:
        assert sq_miles_to_sq_km(100) == 259
        assert sq_miles_to_sq_km(1) == 2
        assert sq_miles_to_sq_km(0) == 0

    @pytest.mark.parametrize(
        ("numerator", "denominator", "expected"),
        [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0), (1, 3, 0)],
    )
    def test_trunc_div_rounds_toward_zero(self, numerator: int, denominator: int, expected: int) -> None:
        assert trunc_div(numerator, denominator) == expected

    def test_trunc_div_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)
