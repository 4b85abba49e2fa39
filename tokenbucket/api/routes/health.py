"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from tokenbucket.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> dict:
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    limiter = request.app.state.rate_limiter
    return StatsResponse(
        capacity=limiter.config.capacity,
        refill_rate=limiter.config.refill_rate,
        tracked_keys=limiter.bucket_count,
    )
