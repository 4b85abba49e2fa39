"""In-process per-key token bucket rate limiter."""

from tokenbucket.core import (
    BucketConfig,
    InvalidConfiguration,
    RateLimiter,
    TokenBucket,
    TokenBucketLimiter,
    new_limiter,
)

__version__ = "0.1.0"

__all__ = [
    "BucketConfig",
    "InvalidConfiguration",
    "RateLimiter",
    "TokenBucket",
    "TokenBucketLimiter",
    "new_limiter",
]
