"""GST calculation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, getcontext, localcontext

from core.logging import get_logger
from core.result import Result, failure, success
from services.gst.types import TaxCalculationInput, TaxCalculationResult, TaxRegime

logger = get_logger(__name__)

HUNDRED = Decimal("100")
ZERO_RATE = Decimal("0")
MAX_RATE = Decimal("100")
GUARD_DIGITS = 10


class InvalidTaxInputError(ValueError):
    """Calculation input is outside the supported domain."""


class TaxCalculatorError(Exception):
    """Error during tax calculation."""

    def __init__(self, message: str) -> None:
        """Initialize with error message."""
        self.message = message
        super().__init__(message)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidTaxInputError(f"Rate must be a number, got {value!r}") from e


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _working_context(amount: int, rate: Decimal) -> Context:
    # Enough digits that no intermediate result is rounded before quantize
    digits = len(str(amount)) + len(rate.as_tuple().digits) + GUARD_DIGITS
    return Context(prec=max(digits, getcontext().prec))


def _validate_amount(amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidTaxInputError(f"Amount must be an integer in minor units, got {amount!r}")
    if amount < 0:
        raise InvalidTaxInputError(f"Amount must be non-negative, got {amount}")


def _validate_rate(rate: Decimal) -> None:
    if not rate.is_finite() or rate < ZERO_RATE or rate > MAX_RATE:
        raise InvalidTaxInputError(f"Rate must be between 0 and 100, got {rate}")


def _validate_jurisdiction(value: object, label: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidTaxInputError(f"{label} jurisdiction is required")


def reverse_gst(total_amount: int, rate: Decimal | int) -> tuple[int, int]:
    """
    Split a tax-inclusive amount into base amount and GST.

    Args:
        total_amount: Amount including GST, in minor units.
        rate: GST rate percentage.

    Returns:
        Tuple of (base_amount, gst_amount).

    Raises:
        InvalidTaxInputError: If the amount is negative or not an integer,
            or the rate is outside [0, 100].
    """
    decimal_rate = _to_decimal(rate)
    _validate_amount(total_amount)
    _validate_rate(decimal_rate)

    with localcontext(_working_context(total_amount, decimal_rate)):
        base_amount = _round_half_up(Decimal(total_amount) / (1 + decimal_rate / HUNDRED))
    return base_amount, total_amount - base_amount


def compute_gst(request: TaxCalculationInput) -> TaxCalculationResult:
    """
    Calculate the GST breakdown for an amount.

    Same state: CGST + SGST, each at half the rate.
    Different states: IGST at the full rate.

    Rounding is half-up. The odd paisa of an intrastate split goes
    wherever ``sgst = total_tax - cgst`` puts it, so the components
    always add up to the total.

    Args:
        request: Calculation input.

    Returns:
        Fully populated TaxCalculationResult.

    Raises:
        InvalidTaxInputError: If amount is negative or not an integer,
            rate is outside [0, 100], or a jurisdiction is blank.
    """
    rate = _to_decimal(request.rate)
    _validate_amount(request.amount)
    _validate_rate(rate)
    _validate_jurisdiction(request.origin_jurisdiction, "Origin")
    _validate_jurisdiction(request.destination_jurisdiction, "Destination")

    with localcontext(_working_context(request.amount, rate)):
        if request.amount_is_inclusive_of_tax:
            total_amount = request.amount
            base_amount, total_tax = reverse_gst(request.amount, rate)
        else:
            base_amount = request.amount
            total_tax = _round_half_up(Decimal(base_amount) * rate / HUNDRED)
            total_amount = base_amount + total_tax

        half_rate = rate / 2
        cgst_amount = _round_half_up(Decimal(total_tax) / 2)

    if request.is_intrastate:
        return TaxCalculationResult(
            base_amount=base_amount,
            cgst_amount=cgst_amount,
            sgst_amount=total_tax - cgst_amount,
            igst_amount=0,
            total_tax=total_tax,
            total_amount=total_amount,
            regime=TaxRegime.SPLIT,
            cgst_rate=half_rate,
            sgst_rate=half_rate,
            igst_rate=ZERO_RATE,
        )

    return TaxCalculationResult(
        base_amount=base_amount,
        cgst_amount=0,
        sgst_amount=0,
        igst_amount=total_tax,
        total_tax=total_tax,
        total_amount=total_amount,
        regime=TaxRegime.UNIFIED,
        cgst_rate=ZERO_RATE,
        sgst_rate=ZERO_RATE,
        igst_rate=rate,
    )


class GSTCalculatorService:
    """
    Service wrapper around ``compute_gst``.

    Returns Results instead of raising, for use in request handlers.
    """

    def calculate(
        self,
        request: TaxCalculationInput,
    ) -> Result[TaxCalculationResult, TaxCalculatorError]:
        """
        Calculate GST for a request.

        Args:
            request: Calculation input.

        Returns:
            Result containing TaxCalculationResult or TaxCalculatorError.
        """
        logger.debug(
            "Calculating GST",
            amount=request.amount,
            rate=str(request.rate),
            origin=request.origin_jurisdiction,
            destination=request.destination_jurisdiction,
            inclusive=request.amount_is_inclusive_of_tax,
        )

        try:
            breakdown = compute_gst(request)
        except InvalidTaxInputError as e:
            logger.warning("Rejected GST calculation input", error=str(e))
            return failure(TaxCalculatorError(str(e)))

        return success(breakdown)

    def calculate_batch(
        self,
        requests: list[TaxCalculationInput],
    ) -> list[Result[TaxCalculationResult, TaxCalculatorError]]:
        """Calculate GST for multiple requests, one Result per request."""
        return [self.calculate(req) for req in requests]
