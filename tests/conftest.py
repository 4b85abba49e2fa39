"""
Shared test fixtures for the rate limiter test suite.

Provides a controllable monotonic clock so refill behaviour can be
tested without sleeping, and a hook that records limiter decisions.
"""

from __future__ import annotations

import pytest

from tokenbucket.core.bucket import BucketConfig
from tokenbucket.core.limiter import TokenBucketLimiter


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingHook:
    """Decision hook that keeps every (key, allowed) pair."""

    def __init__(self) -> None:
        self.events: list[tuple[str, bool]] = []

    def __call__(self, key: str, allowed: bool) -> None:
        self.events.append((key, allowed))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def make_limiter(clock: FakeClock, hook: RecordingHook):
    """Factory for limiters wired to the fake clock and recording hook."""

    def _make(capacity: float = 5, refill_rate: float = 2) -> TokenBucketLimiter:
        return TokenBucketLimiter(
            BucketConfig(capacity=capacity, refill_rate=refill_rate),
            clock=clock,
            on_decision=hook,
        )

    return _make
