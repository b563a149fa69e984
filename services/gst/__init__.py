"""GST calculation service package."""

from services.gst.calculator import (
    GSTCalculatorService,
    InvalidTaxInputError,
    TaxCalculatorError,
    compute_gst,
    reverse_gst,
)
from services.gst.gstin import customer_type, format_gstin, state_code_from_gstin, validate_gstin
from services.gst.types import CustomerType, TaxCalculationInput, TaxCalculationResult, TaxRegime

__all__ = [
    "CustomerType",
    "GSTCalculatorService",
    "InvalidTaxInputError",
    "TaxCalculationInput",
    "TaxCalculationResult",
    "TaxCalculatorError",
    "TaxRegime",
    "compute_gst",
    "customer_type",
    "format_gstin",
    "reverse_gst",
    "state_code_from_gstin",
    "validate_gstin",
]
