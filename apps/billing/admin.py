"""Admin configuration for billing app."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.contrib import admin

from .models import MerchantGSTConfig

if TYPE_CHECKING:
    from django.http import HttpRequest


@admin.register(MerchantGSTConfig)
class MerchantGSTConfigAdmin(admin.ModelAdmin):
    """Admin configuration for MerchantGSTConfig model."""

    list_display = (
        "legal_name",
        "formatted_gstin",
        "merchant_state",
        "default_gst_rate",
        "default_sac_code",
        "is_active",
        "created_at",
    )
    list_filter = ("is_active", "merchant_state")
    search_fields = ("legal_name", "trade_name", "merchant_gstin")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)

    def formatted_gstin(self, obj: MerchantGSTConfig) -> str:
        """Return the GSTIN with display spacing."""
        return obj.formatted_gstin

    formatted_gstin.short_description = "GSTIN"  # type: ignore[attr-defined]

    def save_model(
        self,
        request: HttpRequest | None,
        obj: MerchantGSTConfig,
        form: Any,
        change: bool,
    ) -> None:
        """Keep a single active configuration when saving from the admin."""
        if obj.is_active:
            obj.activate()
        else:
            super().save_model(request, obj, form, change)
