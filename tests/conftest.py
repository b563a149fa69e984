"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from django.core.cache import cache
from django.test import Client
from rest_framework.test import APIClient

if TYPE_CHECKING:
    from apps.accounts.models import User
    from apps.billing.models import MerchantGSTConfig


@pytest.fixture(autouse=True)
def _clear_cache() -> None:
    """Start every test with empty rate limit counters."""
    cache.clear()


@pytest.fixture()
def api_client() -> APIClient:
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture()
def admin_user(db: None) -> User:
    """Create a user on the admin allow-list."""
    from apps.accounts.models import User

    return User.objects.create_user(
        username="admin",
        email="admin@example.com",
        password="testpass123",
        identity_provider_id="user_admin_1",
    )


@pytest.fixture()
def regular_user(db: None) -> User:
    """Create a user who is not on the allow-list."""
    from apps.accounts.models import User

    return User.objects.create_user(
        username="staff",
        email="staff@example.com",
        password="testpass123",
        identity_provider_id="user_not_admin",
    )


@pytest.fixture()
def admin_client(api_client: APIClient, admin_user: User) -> APIClient:
    """Return an API client authenticated as an allow-listed admin."""
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture()
def test_client() -> Client:
    """Return a Django test client."""
    return Client()


@pytest.fixture()
def merchant_config_data() -> dict[str, str]:
    """Return valid merchant configuration fields."""
    return {
        "merchant_gstin": "29ABCDE1234F1Z5",
        "legal_name": "Semly Technologies Private Limited",
        "trade_name": "Semly",
        "merchant_state": "KA",
        "address_line1": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "pincode": "560001",
    }


@pytest.fixture()
def merchant_config(db: None, merchant_config_data: dict[str, str]) -> MerchantGSTConfig:
    """Create an active Karnataka merchant configuration."""
    from apps.billing.models import MerchantGSTConfig

    return MerchantGSTConfig.objects.create(**merchant_config_data)
