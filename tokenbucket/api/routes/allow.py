"""Admission check route."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from tokenbucket.api.schemas import AllowResponse, ErrorResponse

router = APIRouter(tags=["limiter"])


@router.get(
    "/allow/{key}",
    response_model=AllowResponse,
    responses={429: {"model": ErrorResponse}},
)
def allow(request: Request, key: str) -> AllowResponse:
    """Spend one token for ``key``; 429 when the bucket is empty."""
    rate_limiter = request.app.state.rate_limiter

    if not rate_limiter.allow(key):
        raise HTTPException(status_code=429, detail="Rate limit exceeded")

    return AllowResponse(key=key, allowed=True)
