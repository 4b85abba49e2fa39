"""Token bucket core: per-key buckets and the limiter registry."""

from tokenbucket.core.bucket import BucketConfig, TokenBucket
from tokenbucket.core.errors import InvalidConfiguration
from tokenbucket.core.limiter import (
    RateLimiter,
    TokenBucketLimiter,
    log_decision,
    new_limiter,
)

__all__ = [
    "BucketConfig",
    "TokenBucket",
    "InvalidConfiguration",
    "RateLimiter",
    "TokenBucketLimiter",
    "log_decision",
    "new_limiter",
]
