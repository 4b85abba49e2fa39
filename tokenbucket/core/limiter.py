"""
Per-key rate limiter backed by one token bucket per key.

Buckets are created on first use and kept for the lifetime of the
limiter. There is no eviction: a process that sees an unbounded number
of distinct keys grows without bound.
"""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from tokenbucket.core.bucket import BucketConfig, Clock, TokenBucket

logger = logging.getLogger(__name__)

# Called once per allow() with (key, allowed); exceptions are logged, never raised
DecisionHook = Callable[[str, bool], None]


def log_decision(key: str, allowed: bool) -> None:
    """Default decision hook: one INFO line per request."""
    if allowed:
        logger.info("Request allowed for key %r", key)
    else:
        logger.info("Request denied for key %r", key)


class RateLimiter(ABC):
    """Admission check for a keyed stream of requests."""

    @abstractmethod
    def allow(self, key: str) -> bool:
        """Return True if a request for ``key`` is allowed, False if throttled."""


class TokenBucketLimiter(RateLimiter):
    """
    Token bucket rate limiter keyed by arbitrary identifier.

    Every key gets its own bucket with the shared capacity and refill
    rate. Lookups of existing keys take no limiter-wide lock; the
    registry lock is held only while inserting a key seen for the
    first time.
    """

    def __init__(
        self,
        config: BucketConfig,
        clock: Clock = time.monotonic,
        on_decision: Optional[DecisionHook] = None,
    ) -> None:
        self._config = config
        self._clock = clock
        self._on_decision = on_decision or log_decision
        self._buckets: dict[str, TokenBucket] = {}
        self._create_lock = threading.Lock()

    @property
    def config(self) -> BucketConfig:
        return self._config

    @property
    def bucket_count(self) -> int:
        """Number of keys with a bucket (for monitoring)."""
        return len(self._buckets)

    def allow(self, key: str) -> bool:
        """Consume one token for ``key``. Thread-safe."""
        allowed = self._bucket_for(key).try_consume()
        try:
            self._on_decision(key, allowed)
        except Exception:
            logger.exception("Decision hook failed for key %r", key)
        return allowed

    def _bucket_for(self, key: str) -> TokenBucket:
        bucket = self._buckets.get(key)
        if bucket is not None:
            return bucket

        with self._create_lock:
            # Another thread may have created it while we waited
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = TokenBucket(self._config, clock=self._clock)
                self._buckets[key] = bucket
                logger.debug("Created bucket for key %r", key)
            return bucket


def new_limiter(
    capacity: float,
    refill_rate: float,
    clock: Clock = time.monotonic,
    on_decision: Optional[DecisionHook] = None,
) -> TokenBucketLimiter:
    """
    Build a limiter from raw numbers.

    Raises:
        InvalidConfiguration: if capacity or refill_rate is not > 0.
    """
    return TokenBucketLimiter(
        BucketConfig(capacity=capacity, refill_rate=refill_rate),
        clock=clock,
        on_decision=on_decision,
    )
