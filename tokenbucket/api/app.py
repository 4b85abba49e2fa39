"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

import tokenbucket
from tokenbucket.api.routes.allow import router as allow_router
from tokenbucket.api.routes.health import router as health_router
from tokenbucket.config.settings import Settings, get_settings
from tokenbucket.core.limiter import TokenBucketLimiter


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Raises InvalidConfiguration when the limiter settings are invalid.
    """
    settings = settings or get_settings()
    bucket_config = settings.limiter.to_bucket_config()

    app = FastAPI(
        title="Token Bucket Rate Limiter",
        version=tokenbucket.__version__,
        description="Per-key token bucket admission checks",
    )

    # Shared state, accessible via request.app.state in routes
    app.state.settings = settings
    app.state.rate_limiter = TokenBucketLimiter(bucket_config)

    app.include_router(health_router)
    app.include_router(allow_router)

    return app
