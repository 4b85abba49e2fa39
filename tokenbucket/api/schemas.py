"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel


class AllowResponse(BaseModel):
    """Outcome of an admission check that was allowed."""

    key: str
    allowed: bool


class StatsResponse(BaseModel):
    """Limiter configuration and size."""

    capacity: float
    refill_rate: float
    tracked_keys: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
