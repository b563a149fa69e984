"""
Fixed-window rate limiting.

Counters live in a ``RateLimitStore`` passed to the limiter, so the
limiter can run against process memory in tests and against the
Django cache in deployments.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from django.core.cache import cache

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class RateLimitRecord:
    """
    Counter for one identifier in the current window.

    Attributes:
        count: Requests seen in the window.
        reset_at: Unix time the window ends.
    """

    count: int
    reset_at: float


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    """
    Outcome of a rate limit check.

    Attributes:
        allowed: Whether the request may proceed.
        limit: Requests allowed per window.
        remaining: Requests left in the window.
        reset_at: Unix time the window ends.
        retry_after: Seconds until the window ends, rounded up.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: float
    retry_after: int


class RateLimitStore(Protocol):
    """Storage for rate limit counters."""

    def get(self, key: str) -> RateLimitRecord | None:
        """Return the record for ``key``, or None."""
        ...

    def set(self, key: str, record: RateLimitRecord, ttl: int) -> None:
        """Store ``record`` for ``ttl`` seconds."""
        ...


class InMemoryRateLimitStore:
    """Process-local store. Safe to share between threads."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._records: dict[str, RateLimitRecord] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> RateLimitRecord | None:
        """Return the record for ``key``, or None."""
        with self._lock:
            return self._records.get(key)

    def set(self, key: str, record: RateLimitRecord, ttl: int) -> None:
        """Store ``record``. Expiry is handled by ``purge_expired``."""
        with self._lock:
            self._records[key] = record

    def purge_expired(self, now: float | None = None) -> int:
        """
        Drop records whose window has ended.

        Returns:
            Number of records removed.
        """
        now = time.time() if now is None else now
        with self._lock:
            expired = [key for key, record in self._records.items() if now > record.reset_at]
            for key in expired:
                del self._records[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class CacheRateLimitStore:
    """
    Store backed by Django's cache framework.

    Updates are read-modify-write, so concurrent workers may
    undercount slightly.
    """

    def __init__(self, key_prefix: str = "ratelimit") -> None:
        """
        Initialize the cache store.

        Args:
            key_prefix: Prefix for all cache keys.
        """
        self._key_prefix = key_prefix

    def _make_key(self, key: str) -> str:
        return f"{self._key_prefix}:{key}"

    def get(self, key: str) -> RateLimitRecord | None:
        """Return the cached record for ``key``, or None."""
        data = cache.get(self._make_key(key))
        if data is None:
            return None
        return RateLimitRecord(count=data["count"], reset_at=data["reset_at"])

    def set(self, key: str, record: RateLimitRecord, ttl: int) -> None:
        """Cache ``record`` for ``ttl`` seconds."""
        cache.set(
            self._make_key(key),
            {"count": record.count, "reset_at": record.reset_at},
            max(ttl, 1),
        )


class RateLimiter:
    """
    Fixed-window request counter.

    Example:
        >>> limiter = RateLimiter(InMemoryRateLimitStore(), limit=2, window_seconds=60)
        >>> limiter.hit("10.0.0.1").allowed
        True
    """

    def __init__(
        self,
        store: RateLimitStore,
        limit: int = 10,
        window_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Initialize the limiter.

        Args:
            store: Counter storage.
            limit: Requests allowed per window.
            window_seconds: Window length.
            clock: Returns current Unix time.
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_seconds < 1:
            raise ValueError("window_seconds must be at least 1")
        self._store = store
        self._limit = limit
        self._window = window_seconds
        self._clock = clock

    @property
    def limit(self) -> int:
        """Requests allowed per window."""
        return self._limit

    def hit(self, identifier: str) -> RateLimitDecision:
        """
        Count a request for ``identifier`` and decide whether it may proceed.

        Requests over the limit are not counted.
        """
        now = self._clock()
        record = self._store.get(identifier)

        if record is None or now > record.reset_at:
            record = RateLimitRecord(count=1, reset_at=now + self._window)
            self._store.set(identifier, record, self._window)
            return self._decision(True, record, now)

        if record.count >= self._limit:
            return self._decision(False, record, now)

        record = RateLimitRecord(count=record.count + 1, reset_at=record.reset_at)
        self._store.set(identifier, record, math.ceil(record.reset_at - now))
        return self._decision(True, record, now)

    def status(self, identifier: str) -> RateLimitDecision:
        """Report the current state for ``identifier`` without counting."""
        now = self._clock()
        record = self._store.get(identifier)
        if record is None or now > record.reset_at:
            record = RateLimitRecord(count=0, reset_at=now + self._window)
        return self._decision(record.count < self._limit, record, now)

    def _decision(self, allowed: bool, record: RateLimitRecord, now: float) -> RateLimitDecision:
        return RateLimitDecision(
            allowed=allowed,
            limit=self._limit,
            remaining=max(0, self._limit - record.count) if allowed else 0,
            reset_at=record.reset_at,
            retry_after=max(0, math.ceil(record.reset_at - now)),
        )
