"""Models for the billing application."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models, transaction

from services.gst.gstin import format_gstin
from services.gst.states import INDIAN_STATES, ServiceCode

STATE_CHOICES = [(code, state.name) for code, state in INDIAN_STATES.items()]


class MerchantGSTConfig(models.Model):
    """
    The merchant's GST registration, printed on every invoice.

    Only one configuration is active at a time; older ones are kept,
    deactivated, for the invoices that used them.
    """

    merchant_gstin = models.CharField(
        max_length=15,
        help_text="Merchant GSTIN (e.g., '29ABCDE1234F1Z5')",
    )
    legal_name = models.CharField(max_length=255, help_text="Registered legal name")
    trade_name = models.CharField(max_length=255, blank=True, default="")
    merchant_state = models.CharField(
        max_length=2,
        choices=STATE_CHOICES,
        help_text="State of GST registration; decides CGST/SGST vs IGST",
    )
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100, help_text="State name as printed on invoices")
    pincode = models.CharField(max_length=6)
    country = models.CharField(max_length=2, default="IN")
    default_sac_code = models.CharField(max_length=8, default=ServiceCode.SAAS)
    default_gst_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("18.00"),
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(Decimal("100"))],
        help_text="GST rate as percentage (e.g., 18.00 for 18%)",
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Meta options for MerchantGSTConfig model."""

        db_table = "merchant_gst_config"
        ordering = ["-created_at"]
        verbose_name = "Merchant GST Config"
        verbose_name_plural = "Merchant GST Configs"

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.legal_name} ({self.merchant_gstin})"

    @property
    def formatted_gstin(self) -> str:
        """GSTIN with display spacing."""
        return format_gstin(self.merchant_gstin)

    @classmethod
    def get_active(cls) -> MerchantGSTConfig | None:
        """Return the active configuration, or None if there is none."""
        return cls.objects.filter(is_active=True).first()

    def activate(self) -> None:
        """Save this configuration as the only active one."""
        with transaction.atomic():
            type(self).objects.filter(is_active=True).exclude(pk=self.pk).update(is_active=False)
            self.is_active = True
            self.save()
