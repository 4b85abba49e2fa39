"""Exceptions raised by the rate limiter."""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a limiter is built with a non-positive capacity or refill rate."""
