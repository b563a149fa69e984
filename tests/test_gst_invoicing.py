"""Tests for GST reference data and invoice helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from services.gst.invoicing import (
    build_customer_address,
    build_line_item,
    format_amount_inr,
    is_e_invoicing_required,
    rate_to_basis_points,
    should_charge_gst,
)
from services.gst.states import (
    INDIAN_STATES,
    GSTRate,
    ServiceCode,
    default_gst_rate,
    default_sac_code,
    gst_rate_description,
    is_valid_state_code,
    state_for_gst_code,
)


class TestStates:
    """Tests for state reference data."""

    def test_all_states_and_territories(self) -> None:
        """28 states and 8 union territories."""
        assert len(INDIAN_STATES) == 36

    def test_gst_codes_unique(self) -> None:
        """Each numeric code maps back to one state."""
        codes = [state.gst_code for state in INDIAN_STATES.values()]

        assert len(set(codes)) == len(codes)

    def test_state_for_gst_code(self) -> None:
        """Numeric GST codes map to letter codes."""
        assert state_for_gst_code("29") == "KA"
        assert state_for_gst_code("27") == "MH"
        assert state_for_gst_code("07") == "DL"
        assert state_for_gst_code("99") is None

    def test_is_valid_state_code(self) -> None:
        """Only known letter codes are valid."""
        assert is_valid_state_code("KA") is True
        assert is_valid_state_code("ka") is False
        assert is_valid_state_code("XX") is False


class TestRates:
    """Tests for rate constants and descriptions."""

    @pytest.mark.parametrize(
        ("rate", "description"),
        [
            (Decimal("0"), "Zero-rated"),
            (Decimal("5"), "Super reduced rate (5%)"),
            (Decimal("12.00"), "Reduced rate (12%)"),
            (18, "Standard rate (18%)"),
            (Decimal("28"), "Higher rate (28%)"),
            (Decimal("7.50"), "7.5% GST"),
            (Decimal("10"), "10% GST"),
        ],
    )
    def test_gst_rate_description(self, rate: Decimal | int, description: str) -> None:
        """Known slabs get names, others a generic label."""
        assert gst_rate_description(rate) == description

    def test_defaults_for_saas(self) -> None:
        """SaaS is billed at 18% under SAC 998314."""
        assert default_gst_rate() == GSTRate.STANDARD.value == Decimal("18")
        assert default_sac_code() == ServiceCode.SAAS == "998314"


class TestLineItem:
    """Tests for build_line_item."""

    def test_rate_in_basis_points(self) -> None:
        """18% is sent as 1800."""
        item = build_line_item("Pro", 99900, Decimal("18"))

        assert item.tax_rate == 1800

    def test_payload(self) -> None:
        """Line item carries one unit of the plan in INR."""
        payload = build_line_item("Pro", 99900, 18, tax_inclusive=True).to_dict()

        assert payload == {
            "name": "Pro",
            "description": "Pro subscription",
            "amount": 99900,
            "currency": "INR",
            "quantity": 1,
            "sac_code": "998314",
            "tax_rate": 1800,
            "tax_inclusive": True,
        }

    def test_fractional_rate(self) -> None:
        """Fractional rates convert exactly."""
        assert rate_to_basis_points(Decimal("2.5")) == 250
        assert rate_to_basis_points(Decimal("0.125")) == 13


class TestCustomerAddress:
    """Tests for build_customer_address."""

    def test_without_second_line(self) -> None:
        """An empty second line is left out of the payload."""
        address = build_customer_address("12 MG Road", "Bengaluru", "Karnataka", "560001", "")

        assert address.to_dict() == {
            "line1": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "zipcode": "560001",
            "country": "IN",
        }

    def test_with_second_line(self) -> None:
        """The second line is included when present."""
        address = build_customer_address(
            "12 MG Road", "Bengaluru", "Karnataka", "560001", "Floor 3"
        )

        assert address.to_dict()["line2"] == "Floor 3"


class TestFormatAmountINR:
    """Tests for format_amount_inr."""

    @pytest.mark.parametrize(
        ("paise", "expected"),
        [
            (0, "₹0.00"),
            (5, "₹0.05"),
            (99900, "₹999.00"),
            (11800000, "₹1,18,000.00"),
            (123456789, "₹12,34,567.89"),
            (-11800, "-₹118.00"),
            (-5, "-₹0.05"),
            (10**30, "₹10," + "00," * 12 + "000.00"),
        ],
    )
    def test_indian_grouping(self, paise: int, expected: str) -> None:
        """Last three digits, then pairs."""
        assert format_amount_inr(paise) == expected


class TestChargingRules:
    """Tests for GST applicability rules."""

    @pytest.mark.parametrize(
        ("country", "expected"),
        [("IN", True), ("India", True), ("US", False), ("in", False)],
    )
    def test_should_charge_gst(self, country: str, expected: bool) -> None:
        """Only Indian customers are charged GST."""
        assert should_charge_gst(country) is expected

    def test_e_invoicing_threshold(self) -> None:
        """Mandatory strictly above 5 crore."""
        assert is_e_invoicing_required(5) is False
        assert is_e_invoicing_required(5.01) is True
        assert is_e_invoicing_required(Decimal("12")) is True
