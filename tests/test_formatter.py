"""Tests for phonecheck.engine.formatter."""
from __future__ import annotations

import pytest

from phonecheck.engine.formatter import format_number
from phonecheck.engine.models import ParsedPhoneNumber
from phonecheck.metadata.region import FormatRule
from phonecheck.metadata.store import MetadataStore


def _valid(code: int, region: str, nsn: str) -> ParsedPhoneNumber:
    return ParsedPhoneNumber(
        country_calling_code=code,
        region_code=region,
        national_significant_number=nsn,
        raw_input="raw",
        is_valid=True,
    )


class TestFormatRules:
    @pytest.mark.parametrize(
        "code, region, nsn, national, international",
        [
            (44, "GB", "2079460958", "020 7946 0958", "+44 20 7946 0958"),
            (44, "GB", "7911123456", "07911 123456", "+44 7911 123456"),
            (1, "US", "5551234567", "(555) 123-4567", "+1 555-123-4567"),
            (91, "IN", "9876543210", "098765 43210", "+91 98765 43210"),
            (49, "DE", "3012345678", "030 12345678", "+49 30 12345678"),
            (33, "FR", "612345678", "06 12 34 56 78", "+33 6 12 34 56 78"),
            (39, "IT", "0212345678", "02 1234 5678", "+39 02 1234 5678"),
            (81, "JP", "9012345678", "090-1234-5678", "+81 90-1234-5678"),
            (55, "BR", "11912345678", "(11) 91234-5678", "+55 11 91234-5678"),
            (61, "AU", "412345678", "0412 345 678", "+61 412 345 678"),
            (65, "SG", "61234567", "6123 4567", "+65 6123 4567"),
            (7, "RU", "4951234567", "8 (495) 123-45-67", "+7 495 123-45-67"),
            (33, "FR", "801234567", "0 801 23 45 67", "+33 801 23 45 67"),
            (61, "AU", "1800123456", "1800 123 456", "+61 1800 123 456"),
            (65, "SG", "18001234567", "1800 123 4567", "+65 1800 123 4567"),
            (971, "AE", "800123456", "800 123456", "+971 800 123456"),
            (55, "BR", "8001234567", "0800 123 4567", "+55 800 123 4567"),
            (234, "NG", "2033123456", "02033 12 3456", "+234 2033 12 3456"),
            (49, "DE", "8001234567890", "0800 1234567890", "+49 800 1234567890"),
        ],
    )
    def test_rendering(self, store, code, region, nsn, national, international):
        formatted = format_number(_valid(code, region, nsn), store)
        assert formatted.national_format == national
        assert formatted.international_format == international
        assert formatted.e164_format == f"+{code}{nsn}"

    def test_rule_override_drops_national_prefix(self, store):
        formatted = format_number(_valid(86, "CN", "13912345678"), store)
        assert formatted.national_format == "139 1234 5678"

    def test_region_prefix_kept_for_other_rules(self, store):
        formatted = format_number(_valid(86, "CN", "1012345678"), store)
        assert formatted.national_format == "010 1234 5678"


class TestFormatFallback:
    def test_capture_structure_mismatch_renders_undivided(self, store):
        # "06" selects the ten-digit Rome/Milan rule; eight digits don't fit it
        formatted = format_number(_valid(39, "IT", "06123456"), store)
        assert formatted.national_format == "06123456"
        assert formatted.international_format == "+39 06123456"

    def test_no_rule_renders_undivided_with_prefix(self, make_region):
        store = MetadataStore([make_region("ZZ", 999, national_prefix="0")])
        formatted = format_number(_valid(999, "ZZ", "123456"), store)
        assert formatted.national_format == "0123456"
        assert formatted.international_format == "+999 123456"

    def test_no_leading_digits_match(self, make_region):
        rule = FormatRule(pattern=r"(\d{3})(\d{3})", national_template=r"\1 \2", leading_digits="9")
        store = MetadataStore([make_region("ZZ", 999, format_rules=(rule,))])
        assert format_number(_valid(999, "ZZ", "123456"), store).national_format == "123456"
        assert format_number(_valid(999, "ZZ", "923456"), store).national_format == "923 456"


class TestFormatInvalid:
    def test_invalid_number_rejected(self, store):
        parsed = ParsedPhoneNumber(
            country_calling_code=1,
            region_code="unknown",
            national_significant_number="0000000000",
            raw_input="raw",
        )
        with pytest.raises(ValueError, match="Only valid numbers"):
            format_number(parsed, store)
