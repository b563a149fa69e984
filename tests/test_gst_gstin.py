"""Tests for GSTIN helpers."""

from __future__ import annotations

import pytest

from services.gst import CustomerType, customer_type, format_gstin, state_code_from_gstin
from services.gst import validate_gstin as validate

VALID_GSTIN = "29ABCDE1234F1Z5"


class TestValidateGSTIN:
    """Tests for validate_gstin."""

    @pytest.mark.parametrize("gstin", [VALID_GSTIN, "27AAPFU0939F1ZV", "07AAACB1234CAZ0"])
    def test_valid(self, gstin: str) -> None:
        """Well-formed GSTINs pass."""
        assert validate(gstin) is True

    @pytest.mark.parametrize(
        "gstin",
        [
            "",
            "29ABCDE1234F1Z",  # 14 chars
            "29ABCDE1234F1Z55",  # 16 chars
            "29abcde1234f1z5",  # lower case
            "29ABCDe1234F1Z5",  # one lower-case letter
            "2AABCDE1234F1Z5",  # letter in state code
            "29ABCD11234F1Z5",  # digit in PAN letters
            "29ABCDE123AF1Z5",  # letter in PAN digits
            "29ABCDE12341 1Z5",  # wrong length with space
            "29ABCDE1234F0Z5",  # entity number 0
            "29ABCDE1234F1X5",  # missing Z
            " 29ABCDE1234F1Z5",  # leading space
        ],
    )
    def test_invalid(self, gstin: str) -> None:
        """Malformed GSTINs fail without raising."""
        assert validate(gstin) is False

    @pytest.mark.parametrize("value", [None, 29, b"29ABCDE1234F1Z5"])
    def test_non_string(self, value: object) -> None:
        """Non-string input is invalid."""
        assert validate(value) is False


class TestFormatGSTIN:
    """Tests for format_gstin."""

    def test_formats_fifteen_characters(self) -> None:
        """Groups are 2/5/4/1/1/1/1."""
        assert format_gstin(VALID_GSTIN) == "29 ABCDE 1234 F 1 Z 5"

    def test_other_lengths_unchanged(self) -> None:
        """Input that is not 15 characters is returned as is."""
        assert format_gstin("29ABC") == "29ABC"
        assert format_gstin("") == ""

    @pytest.mark.parametrize("value", [None, 29])
    def test_non_string_unchanged(self, value: object) -> None:
        """Non-string input is returned as is."""
        assert format_gstin(value) is value  # type: ignore[arg-type]

    def test_does_not_validate(self) -> None:
        """Any 15-character string is grouped, valid or not."""
        assert format_gstin("abcdefghijklmno") == "ab cdefg hijk l m n o"

    def test_idempotent(self) -> None:
        """Formatting a formatted GSTIN leaves it alone."""
        formatted = format_gstin(VALID_GSTIN)

        assert format_gstin(formatted) == formatted

    def test_stripping_separators_restores_original(self) -> None:
        """Removing the spaces gives back the original GSTIN."""
        assert format_gstin(VALID_GSTIN).replace(" ", "") == VALID_GSTIN


class TestStateCodeFromGSTIN:
    """Tests for state_code_from_gstin."""

    def test_valid_gstin(self) -> None:
        """Returns the leading two digits."""
        assert state_code_from_gstin(VALID_GSTIN) == "29"

    @pytest.mark.parametrize("value", ["29abcde1234f1z5", "", None, "29"])
    def test_invalid_gstin(self, value: object) -> None:
        """Returns None for anything invalid."""
        assert state_code_from_gstin(value) is None


class TestCustomerType:
    """Tests for customer_type."""

    def test_b2b_with_valid_gstin(self) -> None:
        """A valid GSTIN makes the customer B2B."""
        assert customer_type(VALID_GSTIN) is CustomerType.B2B

    @pytest.mark.parametrize("value", [None, "", "not-a-gstin"])
    def test_b2c_otherwise(self, value: str | None) -> None:
        """Missing or invalid GSTIN means B2C."""
        assert customer_type(value) is CustomerType.B2C
