"""Tests for Django models."""

from __future__ import annotations

from decimal import Decimal

import pytest

from apps.accounts.models import User
from apps.billing.models import MerchantGSTConfig


@pytest.mark.django_db
class TestUserModel:
    """Tests for the User model."""

    def test_user_str_returns_username(self) -> None:
        """User __str__ should return the username."""
        user = User(username="testuser", email="test@example.com")

        assert str(user) == "testuser"

    def test_identity_provider_id_optional(self) -> None:
        """Users created locally have no identity-provider ID."""
        user = User.objects.create_user(username="local", password="testpass123")

        assert user.identity_provider_id is None

    def test_identity_provider_id_stored(self) -> None:
        """The identity-provider ID is saved with the user."""
        User.objects.create_user(username="remote", identity_provider_id="user_abc")

        assert User.objects.get(identity_provider_id="user_abc").username == "remote"


@pytest.mark.django_db
class TestMerchantGSTConfig:
    """Tests for the MerchantGSTConfig model."""

    def test_str(self, merchant_config: MerchantGSTConfig) -> None:
        """String form is legal name and GSTIN."""
        assert str(merchant_config) == "Semly Technologies Private Limited (29ABCDE1234F1Z5)"

    def test_defaults(self, merchant_config: MerchantGSTConfig) -> None:
        """New configurations are active SaaS at 18% in India."""
        merchant_config.refresh_from_db()

        assert merchant_config.is_active is True
        assert merchant_config.default_gst_rate == Decimal("18.00")
        assert merchant_config.default_sac_code == "998314"
        assert merchant_config.country == "IN"
        assert merchant_config.address_line2 == ""

    def test_formatted_gstin(self, merchant_config: MerchantGSTConfig) -> None:
        """formatted_gstin adds display spacing."""
        assert merchant_config.formatted_gstin == "29 ABCDE 1234 F 1 Z 5"

    def test_get_active_none(self) -> None:
        """get_active returns None with no configuration."""
        assert MerchantGSTConfig.get_active() is None

    def test_get_active_ignores_inactive(self, merchant_config_data: dict[str, str]) -> None:
        """Inactive configurations are not returned."""
        MerchantGSTConfig.objects.create(**merchant_config_data, is_active=False)

        assert MerchantGSTConfig.get_active() is None

    def test_activate_deactivates_others(
        self, merchant_config: MerchantGSTConfig, merchant_config_data: dict[str, str]
    ) -> None:
        """Activating a configuration leaves it the only active one."""
        replacement = MerchantGSTConfig(**{**merchant_config_data, "merchant_state": "MH"})
        replacement.activate()

        merchant_config.refresh_from_db()
        assert merchant_config.is_active is False
        assert MerchantGSTConfig.objects.filter(is_active=True).count() == 1
        assert MerchantGSTConfig.get_active() == replacement

    def test_activate_existing(
        self, merchant_config: MerchantGSTConfig, merchant_config_data: dict[str, str]
    ) -> None:
        """Re-activating an old configuration switches back to it."""
        replacement = MerchantGSTConfig(**{**merchant_config_data, "merchant_state": "MH"})
        replacement.activate()

        merchant_config.activate()

        replacement.refresh_from_db()
        assert replacement.is_active is False
        assert MerchantGSTConfig.get_active() == merchant_config
