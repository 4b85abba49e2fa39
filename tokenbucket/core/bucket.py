"""
Token bucket state machine for a single key.

Refill is lazy: no timer runs per bucket. Every call to
``try_consume`` first credits the tokens earned since the last call,
then tries to spend one. Both steps happen under a lock owned by the
bucket, so buckets for different keys never contend.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from tokenbucket.core.errors import InvalidConfiguration

# Monotonic clock returning seconds as a float
Clock = Callable[[], float]


def _validate_positive(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"{name} must be greater than 0, got {value!r}")
    return value


@dataclass(frozen=True)
class BucketConfig:
    """Capacity and refill rate shared by every bucket of a limiter."""

    # Maximum tokens a bucket can hold (burst size)
    capacity: float

    # Tokens added per second of elapsed time
    refill_rate: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "capacity", _validate_positive("capacity", self.capacity))
        object.__setattr__(self, "refill_rate", _validate_positive("refill_rate", self.refill_rate))


class TokenBucket:
    """A single token bucket. Starts full."""

    def __init__(self, config: BucketConfig, clock: Clock = time.monotonic) -> None:
        self._capacity = config.capacity
        self._refill_rate = config.refill_rate
        self._clock = clock
        self._tokens = config.capacity
        self._last_refill = clock()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> float:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._refill_rate

    @property
    def tokens(self) -> float:
        """Token level as of the last refill. Does not refill."""
        with self._lock:
            return self._tokens

    def try_consume(self) -> bool:
        """Refill tokens and try to consume one. Returns True if allowed."""
        with self._lock:
            now = self._clock()
            elapsed = now - self._last_refill
            # A stalled clock earns nothing; last_refill must never move backwards
            if elapsed > 0:
                self._tokens = min(self._capacity, self._tokens + elapsed * self._refill_rate)
                self._last_refill = now

            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False

    def __repr__(self) -> str:
        return (
            f"TokenBucket(capacity={self._capacity}, refill_rate={self._refill_rate}, "
            f"tokens={self._tokens:.3f})"
        )
