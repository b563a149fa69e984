"""Indian state reference data and GST rate constants."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True, slots=True)
class IndianState:
    """
    A state or union territory registered for GST.

    Attributes:
        name: Display name.
        gst_code: Two-digit code used as the GSTIN prefix.
    """

    name: str
    gst_code: str


INDIAN_STATES: dict[str, IndianState] = {
    "AP": IndianState("Andhra Pradesh", "37"),
    "AR": IndianState("Arunachal Pradesh", "12"),
    "AS": IndianState("Assam", "18"),
    "BR": IndianState("Bihar", "10"),
    "CG": IndianState("Chhattisgarh", "22"),
    "GA": IndianState("Goa", "30"),
    "GJ": IndianState("Gujarat", "24"),
    "HR": IndianState("Haryana", "06"),
    "HP": IndianState("Himachal Pradesh", "02"),
    "JK": IndianState("Jammu and Kashmir", "01"),
    "JH": IndianState("Jharkhand", "20"),
    "KA": IndianState("Karnataka", "29"),
    "KL": IndianState("Kerala", "32"),
    "MP": IndianState("Madhya Pradesh", "23"),
    "MH": IndianState("Maharashtra", "27"),
    "MN": IndianState("Manipur", "14"),
    "ML": IndianState("Meghalaya", "17"),
    "MZ": IndianState("Mizoram", "15"),
    "NL": IndianState("Nagaland", "13"),
    "OD": IndianState("Odisha", "21"),
    "PB": IndianState("Punjab", "03"),
    "RJ": IndianState("Rajasthan", "08"),
    "SK": IndianState("Sikkim", "11"),
    "TN": IndianState("Tamil Nadu", "33"),
    "TG": IndianState("Telangana", "36"),
    "TR": IndianState("Tripura", "16"),
    "UP": IndianState("Uttar Pradesh", "09"),
    "UK": IndianState("Uttarakhand", "05"),
    "WB": IndianState("West Bengal", "19"),
    "AN": IndianState("Andaman and Nicobar Islands", "35"),
    "CH": IndianState("Chandigarh", "04"),
    "DH": IndianState("Dadra and Nagar Haveli and Daman and Diu", "26"),
    "DL": IndianState("Delhi", "07"),
    "LD": IndianState("Lakshadweep", "31"),
    "PY": IndianState("Puducherry", "34"),
    "LA": IndianState("Ladakh", "38"),
}

_STATES_BY_GST_CODE: dict[str, str] = {
    state.gst_code: code for code, state in INDIAN_STATES.items()
}


class ServiceCode:
    """HSN/SAC codes for the services we invoice."""

    SAAS = "998314"  # IT software services
    IT_CONSULTING = "998313"
    WEB_HOSTING = "997212"  # Online information and database access
    CLOUD_SERVICES = "997331"
    SOFTWARE_DEVELOPMENT = "998311"
    DATA_PROCESSING = "998312"


class GSTRate(Enum):
    """Standard GST slabs, as percentages."""

    ZERO = Decimal("0")
    SUPER_REDUCED = Decimal("5")
    REDUCED = Decimal("12")
    STANDARD = Decimal("18")
    HIGHER = Decimal("28")


_RATE_DESCRIPTIONS: dict[Decimal, str] = {
    GSTRate.ZERO.value: "Zero-rated",
    GSTRate.SUPER_REDUCED.value: "Super reduced rate (5%)",
    GSTRate.REDUCED.value: "Reduced rate (12%)",
    GSTRate.STANDARD.value: "Standard rate (18%)",
    GSTRate.HIGHER.value: "Higher rate (28%)",
}

# SaaS subscriptions are billed at the standard slab.
SAAS_GST_RATE = GSTRate.STANDARD.value

E_INVOICING_TURNOVER_THRESHOLD_CRORES = Decimal("5")


def is_valid_state_code(state_code: str) -> bool:
    """Return True if ``state_code`` is a known two-letter state code."""
    return state_code in INDIAN_STATES


def state_for_gst_code(gst_code: str) -> str | None:
    """
    Map a numeric GST state code to its two-letter state code.

    Args:
        gst_code: Two-digit code, e.g. "29".

    Returns:
        The state code (e.g. "KA"), or None if unknown.
    """
    return _STATES_BY_GST_CODE.get(gst_code)


def gst_rate_description(rate: Decimal | int) -> str:
    """Return a human-readable label for a GST rate."""
    rate = Decimal(rate)
    description = _RATE_DESCRIPTIONS.get(rate)
    if description is not None:
        return description
    return f"{rate.normalize():f}% GST"


def default_sac_code() -> str:
    """Default SAC code for subscription invoices."""
    return ServiceCode.SAAS


def default_gst_rate() -> Decimal:
    """Default GST rate for subscription invoices."""
    return SAAS_GST_RATE
