"""Tests for shared formatting helpers."""

from nailbook.config import settings
from nailbook.utils import format_duration, format_price, normalize_phone


class TestNormalizePhone:
    def test_strips_dashes(self):
        assert normalize_phone("0912-345-678") == "0912345678"

    def test_strips_parentheses(self):
        assert normalize_phone("(09) 1234 5678") == "0912345678"

    def test_preserves_leading_plus(self):
        assert normalize_phone("+886 912 345 678") == "+886912345678"

    def test_strips_whitespace(self):
        assert normalize_phone("  0912345678  ") == "0912345678"

    def test_empty(self):
        assert normalize_phone("") == ""


class TestFormatPrice:
    def test_thousands_separator(self):
        assert format_price(1570) == f"{settings.salon.currency} 1,570"

    def test_zero(self):
        assert format_price(0).endswith(" 0")


class TestFormatDuration:
    def test_minutes_only(self):
        assert format_duration(45) == "45 min"

    def test_hours_only(self):
        assert format_duration(120) == "2 hr"

    def test_hours_and_minutes(self):
        assert format_duration(105) == "1 hr 45 min"

    def test_zero(self):
        assert format_duration(0) == "0 min"
