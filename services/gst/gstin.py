"""
GSTIN (GST identification number) helpers.

A GSTIN is 15 characters, e.g. ``29ABCDE1234F1Z5``:

- 2 digits: state code
- 10 characters: the holder's PAN (5 letters, 4 digits, 1 letter)
- 1 character: entity number (1-9, then A-Z)
- the letter ``Z``
- 1 character: check digit

None of these helpers raise on malformed input; they return
False, the input unchanged, or None.
"""

from __future__ import annotations

import re

from services.gst.types import CustomerType

GSTIN_LENGTH = 15

GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")

# Display groups: state, PAN letters, PAN digits, PAN check, entity, Z, checksum
_DISPLAY_GROUPS = ((0, 2), (2, 7), (7, 11), (11, 12), (12, 13), (13, 14), (14, 15))


def validate_gstin(gstin: object) -> bool:
    """
    Check that a GSTIN has the correct format.

    No normalization is applied: lower-case letters or
    surrounding whitespace make the GSTIN invalid.
    """
    if not isinstance(gstin, str) or len(gstin) != GSTIN_LENGTH:
        return False
    return GSTIN_PATTERN.match(gstin) is not None


def format_gstin(gstin: str | None) -> str | None:
    """
    Format a GSTIN for display, e.g. ``29 ABCDE 1234 F 1 Z 5``.

    Strings that are not 15 characters long, and non-strings, are
    returned unchanged. The format itself is not validated.
    """
    if not isinstance(gstin, str) or len(gstin) != GSTIN_LENGTH:
        return gstin
    return " ".join(gstin[start:end] for start, end in _DISPLAY_GROUPS)


def state_code_from_gstin(gstin: object) -> str | None:
    """Return the two-digit state code of a valid GSTIN, else None."""
    if not validate_gstin(gstin):
        return None
    return gstin[:2]  # type: ignore[index]


def customer_type(gstin: str | None = None) -> CustomerType:
    """Customers with a valid GSTIN are B2B, everyone else B2C."""
    if gstin and validate_gstin(gstin):
        return CustomerType.B2B
    return CustomerType.B2C
