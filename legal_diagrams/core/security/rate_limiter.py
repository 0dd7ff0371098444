"""
Fixed-window rate limiter.

Tracks request counts per caller key. The clock is injected so windows can
be driven from tests, and expired entries are removed only when the host
calls ``prune()``; there is no background timer.

Dependencies: threading, time (stdlib)
System role: Per-caller request throttling for the HTTP layer
"""

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of one rate limit check."""

    allowed: bool
    remaining: int
    reset_time: float


@dataclass
class _WindowEntry:
    count: int
    reset_time: float


class RateLimiter:
    """Fixed-window request counter keyed by caller identity."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """
        Initialize rate limiter.

        Args:
            clock: Callable returning the current time in seconds
        """
        self._clock = clock
        self._entries: dict[str, _WindowEntry] = {}
        self._lock = threading.Lock()

    def now(self) -> float:
        """Current time according to the injected clock."""
        return self._clock()

    def check_and_consume(
        self,
        key: str,
        limit: int,
        window_seconds: float,
    ) -> RateLimitDecision:
        """
        Consume one request from the caller's window if any remain.

        A new window opens when the caller has no entry or its window has
        passed its reset time.

        Args:
            key: Caller identity (e.g. client address)
            limit: Requests allowed per window
            window_seconds: Window length in seconds

        Returns:
            RateLimitDecision: Whether the request is allowed, what remains,
                and when the window resets
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)

            if entry is None or now > entry.reset_time:
                entry = _WindowEntry(count=1, reset_time=now + window_seconds)
                self._entries[key] = entry
                return RateLimitDecision(
                    allowed=True,
                    remaining=limit - 1,
                    reset_time=entry.reset_time,
                )

            if entry.count >= limit:
                logger.warning(
                    "Rate limit exceeded",
                    extra={"key": key, "limit": limit, "reset_time": entry.reset_time},
                )
                return RateLimitDecision(allowed=False, remaining=0, reset_time=entry.reset_time)

            entry.count += 1
            return RateLimitDecision(
                allowed=True,
                remaining=limit - entry.count,
                reset_time=entry.reset_time,
            )

    def prune(self) -> int:
        """
        Remove entries whose window has expired.

        Returns:
            int: Number of entries removed
        """
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if now > entry.reset_time]
            for key in expired:
                del self._entries[key]

        if expired:
            logger.info("Pruned expired rate limit entries", extra={"removed": len(expired)})
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
