"""DRF throttle backed by the security rate limiter."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from django.conf import settings
from rest_framework.throttling import BaseThrottle

from services.security.events import client_ip, log_rate_limit_exceeded
from services.security.rate_limiting import CacheRateLimitStore, RateLimiter

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView


@lru_cache(maxsize=1)
def _limiter(limit: int, window_seconds: int) -> RateLimiter:
    return RateLimiter(
        CacheRateLimitStore(key_prefix="admin-api"),
        limit=limit,
        window_seconds=window_seconds,
    )


def get_rate_limiter() -> RateLimiter:
    """Limiter configured from the RATE_LIMIT setting."""
    config = settings.RATE_LIMIT
    return _limiter(config["REQUESTS"], config["WINDOW_SECONDS"])


class AdminRateThrottle(BaseThrottle):
    """Limit admin API requests per client IP."""

    def __init__(self) -> None:
        """Initialize with no pending wait."""
        self._retry_after: int | None = None

    def allow_request(self, request: Request, view: APIView) -> bool:
        """Count the request and allow it while under the limit."""
        if not settings.RATE_LIMIT["ENABLED"]:
            return True

        identifier = client_ip(request._request)
        decision = get_rate_limiter().hit(identifier)
        if decision.allowed:
            return True

        self._retry_after = decision.retry_after
        log_rate_limit_exceeded(identifier, request.path)
        return False

    def wait(self) -> float | None:
        """Seconds until the client may retry."""
        return self._retry_after
