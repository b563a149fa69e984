"""Invoice helpers for the payment processor's GST invoicing API."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from services.gst.states import E_INVOICING_TURNOVER_THRESHOLD_CRORES, default_sac_code

CURRENCY_INR = "INR"
COUNTRY_INDIA = "IN"

# The processor takes tax rates in basis points: 18% -> 1800
BASIS_POINTS_PER_PERCENT = 100


@dataclass(frozen=True, slots=True)
class InvoiceLineItem:
    """
    A processor invoice line item.

    Attributes:
        name: Item name (plan name).
        description: Item description.
        amount: Amount in paise.
        currency: Currency code.
        quantity: Quantity billed.
        sac_code: SAC code for the service.
        tax_rate: GST rate in basis points.
        tax_inclusive: Whether ``amount`` includes GST.
    """

    name: str
    description: str
    amount: int
    currency: str
    quantity: int
    sac_code: str
    tax_rate: int
    tax_inclusive: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the processor payload."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CustomerAddress:
    """Billing address in the processor's field names."""

    line1: str
    city: str
    state: str
    zipcode: str
    country: str = COUNTRY_INDIA
    line2: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the processor payload, omitting an empty second line."""
        data = {
            "line1": self.line1,
            "city": self.city,
            "state": self.state,
            "zipcode": self.zipcode,
            "country": self.country,
        }
        if self.line2:
            data["line2"] = self.line2
        return data


def rate_to_basis_points(rate: Decimal | int) -> int:
    """Convert a percentage rate to integer basis points."""
    bps = Decimal(rate) * BASIS_POINTS_PER_PERCENT
    return int(bps.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_line_item(
    plan_name: str,
    amount: int,
    gst_rate: Decimal | int,
    *,
    tax_inclusive: bool = False,
) -> InvoiceLineItem:
    """
    Build an invoice line item for a subscription plan.

    Args:
        plan_name: Subscription plan name.
        amount: Amount in paise.
        gst_rate: GST rate percentage.
        tax_inclusive: Whether ``amount`` already includes GST.

    Returns:
        Line item with one unit of the plan.
    """
    return InvoiceLineItem(
        name=plan_name,
        description=f"{plan_name} subscription",
        amount=amount,
        currency=CURRENCY_INR,
        quantity=1,
        sac_code=default_sac_code(),
        tax_rate=rate_to_basis_points(gst_rate),
        tax_inclusive=tax_inclusive,
    )


def build_customer_address(
    address_line1: str,
    city: str,
    state: str,
    pincode: str,
    address_line2: str | None = None,
) -> CustomerAddress:
    """Build a processor billing address for an Indian customer."""
    return CustomerAddress(
        line1=address_line1,
        line2=address_line2 or None,
        city=city,
        state=state,
        zipcode=pincode,
    )


def format_amount_inr(amount: int) -> str:
    """
    Format paise as rupees with Indian digit grouping.

    Example:
        >>> format_amount_inr(11800000)
        '₹1,18,000.00'
    """
    rupees, paise = divmod(abs(amount), 100)
    whole, fraction = str(rupees), f"{paise:02d}"

    # Last three digits, then groups of two
    head, tail = whole[:-3], whole[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    grouped = ",".join([*groups, tail])

    sign = "-" if amount < 0 else ""
    return f"{sign}₹{grouped}.{fraction}"


def should_charge_gst(customer_country: str) -> bool:
    """GST applies to every customer in India."""
    return customer_country in {COUNTRY_INDIA, "India"}


def is_e_invoicing_required(annual_turnover_crores: Decimal | int | float) -> bool:
    """E-invoicing is mandatory above 5 crore annual turnover."""
    return Decimal(str(annual_turnover_crores)) > E_INVOICING_TURNOVER_THRESHOLD_CRORES
