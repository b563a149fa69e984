"""Permissions for the admin API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from rest_framework.permissions import BasePermission

from services.security.events import log_access_denied

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView


def identity_provider_id(user: object) -> str | None:
    """Return the user's identity-provider ID, if any."""
    return getattr(user, "identity_provider_id", None) or None


def is_admin_user(user: object) -> bool:
    """Check an authenticated user against the ADMIN_USER_IDS allow-list."""
    if not getattr(user, "is_authenticated", False):
        return False
    user_id = identity_provider_id(user)
    if not user_id:
        return False
    return user_id.strip() in settings.ADMIN_USER_IDS


class IsAllowListedAdmin(BasePermission):
    """Allow only users whose identity-provider ID is on the allow-list."""

    message = "Forbidden - Admin access required"

    def has_permission(self, request: Request, view: APIView) -> bool:
        """Check the allow-list, logging denials."""
        if is_admin_user(request.user):
            return True
        log_access_denied(
            identity_provider_id(request.user),
            resource=request.path,
            request=request._request,
        )
        return False
