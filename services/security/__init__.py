"""Input sanitization, rate limiting and security event logging."""

from services.security.events import SecurityEventType, log_security_event
from services.security.rate_limiting import (
    CacheRateLimitStore,
    InMemoryRateLimitStore,
    RateLimitDecision,
    RateLimiter,
    RateLimitStore,
)

__all__ = [
    "CacheRateLimitStore",
    "InMemoryRateLimitStore",
    "RateLimitDecision",
    "RateLimitStore",
    "RateLimiter",
    "SecurityEventType",
    "log_security_event",
]
