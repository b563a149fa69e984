"""Types for the GST calculator."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TaxRegime(str, Enum):
    """How GST is levied on a supply."""

    # Intrastate: half central, half state
    SPLIT = "CGST_SGST"
    # Interstate: one integrated tax
    UNIFIED = "IGST"


class CustomerType(str, Enum):
    """Invoice customer category."""

    B2B = "B2B"
    B2C = "B2C"


@dataclass(frozen=True, slots=True)
class TaxCalculationInput:
    """
    Input for a GST calculation.

    Attributes:
        amount: Amount in minor currency units (paise).
        rate: GST rate as a percentage (e.g. 18).
        origin_jurisdiction: Seller's registered state code.
        destination_jurisdiction: Buyer's state code.
        amount_is_inclusive_of_tax: Whether ``amount`` already includes GST.
    """

    amount: int
    rate: Decimal
    origin_jurisdiction: str
    destination_jurisdiction: str
    amount_is_inclusive_of_tax: bool = False

    @property
    def is_intrastate(self) -> bool:
        """Check if seller and buyer are in the same jurisdiction."""
        return self.origin_jurisdiction == self.destination_jurisdiction


@dataclass(frozen=True, slots=True)
class TaxCalculationResult:
    """
    GST breakdown for one amount.

    All amounts are in minor currency units. Components of the regime
    that does not apply are zero.

    Attributes:
        base_amount: Amount before GST.
        cgst_amount: Central GST (intrastate only).
        sgst_amount: State GST (intrastate only).
        igst_amount: Integrated GST (interstate only).
        total_tax: Total GST.
        total_amount: Base amount plus GST.
        regime: Which regime was applied.
        cgst_rate: CGST rate percentage.
        sgst_rate: SGST rate percentage.
        igst_rate: IGST rate percentage.
    """

    base_amount: int
    cgst_amount: int
    sgst_amount: int
    igst_amount: int
    total_tax: int
    total_amount: int
    regime: TaxRegime
    cgst_rate: Decimal
    sgst_rate: Decimal
    igst_rate: Decimal

    @property
    def is_intrastate(self) -> bool:
        """Check if the CGST/SGST split was applied."""
        return self.regime is TaxRegime.SPLIT

    def to_dict(self) -> dict[str, int | str]:
        """Serialize to plain values, rates as strings."""
        return {
            "base_amount": self.base_amount,
            "cgst_amount": self.cgst_amount,
            "sgst_amount": self.sgst_amount,
            "igst_amount": self.igst_amount,
            "total_tax": self.total_tax,
            "total_amount": self.total_amount,
            "regime": self.regime.value,
            "cgst_rate": str(self.cgst_rate),
            "sgst_rate": str(self.sgst_rate),
            "igst_rate": str(self.igst_rate),
        }
