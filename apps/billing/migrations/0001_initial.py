from decimal import Decimal

import django.core.validators
from django.db import migrations, models

STATE_CHOICES = [
    ("AP", "Andhra Pradesh"),
    ("AR", "Arunachal Pradesh"),
    ("AS", "Assam"),
    ("BR", "Bihar"),
    ("CG", "Chhattisgarh"),
    ("GA", "Goa"),
    ("GJ", "Gujarat"),
    ("HR", "Haryana"),
    ("HP", "Himachal Pradesh"),
    ("JK", "Jammu and Kashmir"),
    ("JH", "Jharkhand"),
    ("KA", "Karnataka"),
    ("KL", "Kerala"),
    ("MP", "Madhya Pradesh"),
    ("MH", "Maharashtra"),
    ("MN", "Manipur"),
    ("ML", "Meghalaya"),
    ("MZ", "Mizoram"),
    ("NL", "Nagaland"),
    ("OD", "Odisha"),
    ("PB", "Punjab"),
    ("RJ", "Rajasthan"),
    ("SK", "Sikkim"),
    ("TN", "Tamil Nadu"),
    ("TG", "Telangana"),
    ("TR", "Tripura"),
    ("UP", "Uttar Pradesh"),
    ("UK", "Uttarakhand"),
    ("WB", "West Bengal"),
    ("AN", "Andaman and Nicobar Islands"),
    ("CH", "Chandigarh"),
    ("DH", "Dadra and Nagar Haveli and Daman and Diu"),
    ("DL", "Delhi"),
    ("LD", "Lakshadweep"),
    ("PY", "Puducherry"),
    ("LA", "Ladakh"),
]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MerchantGSTConfig",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "merchant_gstin",
                    models.CharField(
                        help_text="Merchant GSTIN (e.g., '29ABCDE1234F1Z5')", max_length=15
                    ),
                ),
                (
                    "legal_name",
                    models.CharField(help_text="Registered legal name", max_length=255),
                ),
                ("trade_name", models.CharField(blank=True, default="", max_length=255)),
                (
                    "merchant_state",
                    models.CharField(
                        choices=STATE_CHOICES,
                        help_text="State of GST registration; decides CGST/SGST vs IGST",
                        max_length=2,
                    ),
                ),
                ("address_line1", models.CharField(max_length=255)),
                ("address_line2", models.CharField(blank=True, default="", max_length=255)),
                ("city", models.CharField(max_length=100)),
                (
                    "state",
                    models.CharField(
                        help_text="State name as printed on invoices", max_length=100
                    ),
                ),
                ("pincode", models.CharField(max_length=6)),
                ("country", models.CharField(default="IN", max_length=2)),
                ("default_sac_code", models.CharField(default="998314", max_length=8)),
                (
                    "default_gst_rate",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("18.00"),
                        help_text="GST rate as percentage (e.g., 18.00 for 18%)",
                        max_digits=5,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0")),
                            django.core.validators.MaxValueValidator(Decimal("100")),
                        ],
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Merchant GST Config",
                "verbose_name_plural": "Merchant GST Configs",
                "db_table": "merchant_gst_config",
                "ordering": ["-created_at"],
            },
        ),
    ]
