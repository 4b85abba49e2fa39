"""
Central configuration for the rate limiter service.

All tunables live here. Nothing is hardcoded in module code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from tokenbucket.core.bucket import BucketConfig


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class LimiterSettings:
    """Token bucket parameters shared by every key."""

    # Maximum tokens per key (burst size)
    capacity: float = 10.0

    # Tokens added per second
    refill_rate: float = 1.0

    def to_bucket_config(self) -> BucketConfig:
        """Validate and convert. Raises InvalidConfiguration on bad values."""
        return BucketConfig(capacity=self.capacity, refill_rate=self.refill_rate)


@dataclass(frozen=True)
class ServerSettings:
    """Settings for the HTTP server."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.limiter.capacity)
    """

    project_root: Path = field(default_factory=_project_root)
    limiter: LimiterSettings = field(default_factory=LimiterSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    @property
    def data_dir(self) -> Path:
        return self.project_root / "data"

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    settings = Settings()
    settings.ensure_dirs()
    return settings
