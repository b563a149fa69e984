"""API serializers for the billing admin API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from rest_framework import serializers

from apps.billing.models import MerchantGSTConfig
from services.gst.gstin import validate_gstin
from services.gst.states import is_valid_state_code
from services.security.sanitization import sanitize_user_input

# Free-text fields cleaned before they are stored
_FREE_TEXT_FIELDS = ("legal_name", "trade_name", "address_line1", "address_line2", "city", "state")


class MerchantGSTConfigSerializer(serializers.ModelSerializer):
    """Serializer for reading and replacing the merchant GST configuration."""

    formatted_gstin = serializers.CharField(read_only=True)

    class Meta:
        """Meta options for MerchantGSTConfigSerializer."""

        model = MerchantGSTConfig
        fields = [
            "id",
            "merchant_gstin",
            "formatted_gstin",
            "legal_name",
            "trade_name",
            "merchant_state",
            "address_line1",
            "address_line2",
            "city",
            "state",
            "pincode",
            "country",
            "default_sac_code",
            "default_gst_rate",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "formatted_gstin", "is_active", "created_at", "updated_at"]

    def to_internal_value(self, data: Any) -> Any:
        """Sanitize free-text fields before field validation."""
        if hasattr(data, "copy"):
            data = data.copy()
            for field in _FREE_TEXT_FIELDS:
                if isinstance(data.get(field), str):
                    data[field] = sanitize_user_input(data[field], max_length=255)
        return super().to_internal_value(data)

    def validate_merchant_gstin(self, value: str) -> str:
        """GSTIN must be well formed."""
        if not validate_gstin(value):
            raise serializers.ValidationError("Invalid merchant GSTIN format")
        return value

    def validate_merchant_state(self, value: str) -> str:
        """State must be a known state code."""
        if not is_valid_state_code(value):
            raise serializers.ValidationError("Invalid merchant state code")
        return value

    def validate_pincode(self, value: str) -> str:
        """Indian PIN codes are six digits."""
        if len(value) != 6 or not value.isdigit():
            raise serializers.ValidationError("Pincode must be 6 digits")
        return value


class GSTCalculationInputSerializer(serializers.Serializer):
    """Input for previewing a GST calculation against the merchant config."""

    amount = serializers.IntegerField(
        min_value=0,
        help_text="Amount in paise",
    )
    rate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        required=False,
        help_text="GST rate percentage (defaults to the merchant's default rate)",
    )
    customer_state = serializers.CharField(max_length=2, required=False)
    customer_gstin = serializers.CharField(max_length=15, required=False)
    is_tax_inclusive = serializers.BooleanField(default=False)
    plan_name = serializers.CharField(max_length=100, required=False, default="Subscription")

    def validate_customer_state(self, value: str) -> str:
        """State must be a known state code."""
        if not is_valid_state_code(value):
            raise serializers.ValidationError("Invalid customer state code")
        return value

    def validate_customer_gstin(self, value: str) -> str:
        """GSTIN must be well formed when given."""
        if not validate_gstin(value):
            raise serializers.ValidationError("Invalid customer GSTIN format")
        return value

    def validate_plan_name(self, value: str) -> str:
        """Clean the plan name used on the line item."""
        return sanitize_user_input(value, max_length=100)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Require a way to determine the customer's state."""
        if not attrs.get("customer_state") and not attrs.get("customer_gstin"):
            raise serializers.ValidationError(
                "Either customer_state or customer_gstin is required"
            )
        return attrs
