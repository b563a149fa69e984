"""Admin API views for GST configuration and calculation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.billing.models import MerchantGSTConfig
from apps.billing.permissions import IsAllowListedAdmin, identity_provider_id
from apps.billing.serializers import GSTCalculationInputSerializer, MerchantGSTConfigSerializer
from apps.billing.throttling import AdminRateThrottle
from core.logging import get_logger
from services.gst import GSTCalculatorService, TaxCalculationInput, customer_type
from services.gst.gstin import state_code_from_gstin
from services.gst.invoicing import build_line_item, format_amount_inr
from services.gst.states import gst_rate_description, state_for_gst_code
from services.security.events import log_admin_action, log_invalid_input

if TYPE_CHECKING:
    from rest_framework.request import Request

logger = get_logger(__name__)


class AdminAPIView(APIView):
    """Base view for the admin API: allow-listed admins only, rate limited."""

    permission_classes = [IsAllowListedAdmin]
    throttle_classes = [AdminRateThrottle]

    def check_permissions(self, request: Request) -> None:
        """Throttle before the allow-list check so denied callers are limited too."""
        super().check_throttles(request)
        super().check_permissions(request)

    def check_throttles(self, request: Request) -> None:
        """Throttles already ran in ``check_permissions``."""

    def invalid_input(self, request: Request, errors: Any) -> Response:
        """Log and return a 400 for rejected input."""
        log_invalid_input(
            identity_provider_id(request.user),
            str(errors),
            request=request._request,
        )
        return Response(errors, status=status.HTTP_400_BAD_REQUEST)


class AdminCheckView(AdminAPIView):
    """
    Report whether the current user is an admin.

    Non-admins never reach ``get``; the permission check answers 403.
    """

    def get(self, request: Request) -> Response:
        """Return admin status."""
        return Response({"is_admin": True})


class MerchantGSTConfigView(AdminAPIView):
    """
    Read or replace the merchant GST configuration.

    GET returns the active configuration. POST stores a new one and
    deactivates the previous.
    """

    def get(self, request: Request) -> Response:
        """Return the active configuration."""
        config = MerchantGSTConfig.get_active()
        if config is None:
            return Response(
                {
                    "merchant_config": None,
                    "message": "No merchant GST configuration found",
                }
            )
        return Response({"merchant_config": MerchantGSTConfigSerializer(config).data})

    def post(self, request: Request) -> Response:
        """Validate and activate a new configuration."""
        serializer = MerchantGSTConfigSerializer(data=request.data)
        if not serializer.is_valid():
            return self.invalid_input(request, serializer.errors)

        values = {
            "default_gst_rate": settings.GST_DEFAULT_RATE,
            "default_sac_code": settings.GST_DEFAULT_SAC_CODE,
            **serializer.validated_data,
        }
        config = MerchantGSTConfig(**values)
        config.activate()

        log_admin_action(
            identity_provider_id(request.user) or "",
            action="merchant_gst_config.update",
            request=request._request,
            config_id=config.pk,
            merchant_state=config.merchant_state,
        )
        logger.info("Merchant GST configuration updated", config_id=config.pk)

        return Response(
            {
                "success": True,
                "message": "Merchant GST configuration updated successfully",
                "merchant_config": MerchantGSTConfigSerializer(config).data,
            },
            status=status.HTTP_201_CREATED,
        )


class GSTCalculationView(AdminAPIView):
    """
    Preview the GST breakdown and invoice line item for an amount.

    The seller's state and default rate come from the active merchant
    configuration; the buyer's state from the request, either directly
    or from the buyer's GSTIN.
    """

    def post(self, request: Request) -> Response:
        """Calculate GST for the posted amount."""
        serializer = GSTCalculationInputSerializer(data=request.data)
        if not serializer.is_valid():
            return self.invalid_input(request, serializer.errors)
        data = serializer.validated_data

        merchant = MerchantGSTConfig.get_active()
        if merchant is None:
            return Response(
                {"error": "No merchant GST configuration found"},
                status=status.HTTP_409_CONFLICT,
            )

        customer_gstin = data.get("customer_gstin")
        customer_state = data.get("customer_state") or self._state_from_gstin(customer_gstin)
        if customer_state is None:
            return self.invalid_input(
                request, {"customer_gstin": ["Unknown state code in customer GSTIN"]}
            )

        rate = data.get("rate", merchant.default_gst_rate)
        calculation = TaxCalculationInput(
            amount=data["amount"],
            rate=rate,
            origin_jurisdiction=merchant.merchant_state,
            destination_jurisdiction=customer_state,
            amount_is_inclusive_of_tax=data["is_tax_inclusive"],
        )

        result = GSTCalculatorService().calculate(calculation)
        if result.is_failure():
            return self.invalid_input(request, {"error": result.error.message})
        breakdown = result.unwrap()

        line_item = build_line_item(
            data["plan_name"],
            data["amount"],
            rate,
            tax_inclusive=data["is_tax_inclusive"],
        )

        return Response(
            {
                "breakdown": breakdown.to_dict(),
                "customer_type": customer_type(customer_gstin).value,
                "merchant_state": merchant.merchant_state,
                "customer_state": customer_state,
                "rate_description": gst_rate_description(rate),
                "formatted": {
                    "base_amount": format_amount_inr(breakdown.base_amount),
                    "total_tax": format_amount_inr(breakdown.total_tax),
                    "total_amount": format_amount_inr(breakdown.total_amount),
                },
                "line_item": line_item.to_dict(),
            }
        )

    @staticmethod
    def _state_from_gstin(gstin: str | None) -> str | None:
        gst_code = state_code_from_gstin(gstin)
        if gst_code is None:
            return None
        return state_for_gst_code(gst_code)
