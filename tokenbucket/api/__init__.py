"""FastAPI surface that translates limiter denials into HTTP 429."""

from tokenbucket.api.app import create_app

__all__ = ["create_app"]
