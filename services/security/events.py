"""
Security event logging.

Events go through structlog under the ``security`` logger so they can
be filtered and shipped separately from application logs.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from core.logging import get_logger

if TYPE_CHECKING:
    from django.http import HttpRequest

logger = get_logger("security")

# Logged input is cut to this many characters
MAX_LOGGED_INPUT_LENGTH = 100


class SecurityEventType(str, Enum):
    """Kinds of security events."""

    AUTH_SUCCESS = "auth_success"
    AUTH_FAILURE = "auth_failure"
    ACCESS_DENIED = "access_denied"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INVALID_INPUT = "invalid_input"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"
    ADMIN_ACTION = "admin_action"

    @property
    def is_critical(self) -> bool:
        """Critical events are logged at warning level."""
        return self in _CRITICAL_EVENTS


_CRITICAL_EVENTS = frozenset(
    {
        SecurityEventType.ACCESS_DENIED,
        SecurityEventType.RATE_LIMIT_EXCEEDED,
        SecurityEventType.SUSPICIOUS_ACTIVITY,
        SecurityEventType.AUTH_FAILURE,
    }
)


def client_ip(request: HttpRequest) -> str:
    """Best-effort client address, preferring proxy headers."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("HTTP_X_REAL_IP") or request.META.get("REMOTE_ADDR") or "unknown"


def request_metadata(request: HttpRequest) -> dict[str, str]:
    """Extract ip, user agent and path from a request."""
    return {
        "ip": client_ip(request),
        "user_agent": request.META.get("HTTP_USER_AGENT", "unknown"),
        "path": request.path,
    }


def log_security_event(
    event_type: SecurityEventType,
    *,
    user_id: str | None = None,
    request: HttpRequest | None = None,
    **details: Any,
) -> None:
    """
    Log a security event.

    Args:
        event_type: Kind of event.
        user_id: Identity-provider user ID, if known.
        request: Request the event happened on, for ip/agent/path.
        **details: Extra event fields.
    """
    fields: dict[str, Any] = {"event_type": event_type.value, **details}
    if user_id:
        fields["user_id"] = user_id
    if request is not None:
        fields.update(request_metadata(request))

    if event_type.is_critical:
        logger.warning("Security event", **fields)
    else:
        logger.info("Security event", **fields)


def log_auth_success(user_id: str, request: HttpRequest | None = None) -> None:
    """Log a successful authentication."""
    log_security_event(SecurityEventType.AUTH_SUCCESS, user_id=user_id, request=request)


def log_auth_failure(reason: str, request: HttpRequest | None = None) -> None:
    """Log a failed authentication."""
    log_security_event(SecurityEventType.AUTH_FAILURE, request=request, reason=reason)


def log_access_denied(
    user_id: str | None,
    resource: str,
    request: HttpRequest | None = None,
) -> None:
    """Log a request rejected by authorization."""
    log_security_event(
        SecurityEventType.ACCESS_DENIED,
        user_id=user_id,
        request=request,
        resource=resource,
    )


def log_rate_limit_exceeded(identifier: str, path: str) -> None:
    """Log a client that hit the rate limit."""
    log_security_event(SecurityEventType.RATE_LIMIT_EXCEEDED, ip=identifier, path=path)


def log_invalid_input(
    user_id: str | None,
    value: str,
    request: HttpRequest | None = None,
) -> None:
    """Log rejected input, truncated."""
    log_security_event(
        SecurityEventType.INVALID_INPUT,
        user_id=user_id,
        request=request,
        input=value[:MAX_LOGGED_INPUT_LENGTH],
    )


def log_admin_action(
    user_id: str,
    action: str,
    request: HttpRequest | None = None,
    **details: Any,
) -> None:
    """Log a change made through the admin API."""
    log_security_event(
        SecurityEventType.ADMIN_ACTION,
        user_id=user_id,
        request=request,
        action=action,
        **details,
    )
