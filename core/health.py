"""Health check endpoint for monitoring."""

from django.core.cache import cache
from django.db import DatabaseError, connection
from django.http import JsonResponse

from core.logging import get_logger

logger = get_logger(__name__)

_CACHE_CHECK_KEY = "health:check"


def health_check(_request: object) -> JsonResponse:
    """
    Report database and cache health.

    Returns 200 when every check passes, 503 otherwise.
    """
    checks: dict[str, dict[str, str]] = {
        "database": _check_database(),
        "cache": _check_cache(),
    }

    all_healthy = all(check.get("status") == "healthy" for check in checks.values())
    if not all_healthy:
        logger.warning("Health check degraded", checks=checks)

    return JsonResponse(
        {
            "status": "healthy" if all_healthy else "degraded",
            "checks": checks,
        },
        status=200 if all_healthy else 503,
    )


def _check_database() -> dict[str, str]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        return {"status": "healthy"}
    except DatabaseError as e:
        return {"status": "unhealthy", "error": str(e)}


def _check_cache() -> dict[str, str]:
    # Rate limit counters live in the cache, so an outage disables limiting
    try:
        cache.set(_CACHE_CHECK_KEY, "ok", 5)
        cache.get(_CACHE_CHECK_KEY)
    except Exception as e:  # noqa: BLE001 - backends raise their own error types
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy"}
