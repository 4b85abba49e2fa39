"""Uvicorn entrypoint for running the API server."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from tokenbucket.config.logging_config import setup_logging
from tokenbucket.config.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    server = get_settings().server
    parser = argparse.ArgumentParser(description="Run the rate limiter API server.")
    parser.add_argument("--host", default=server.host, help="Bind address.")
    parser.add_argument("--port", type=int, default=server.port, help="Bind port.")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, level=args.log_level)
    logger = logging.getLogger(__name__)

    logger.info(
        "Starting API server on %s:%d (capacity=%s, refill_rate=%s)",
        args.host,
        args.port,
        settings.limiter.capacity,
        settings.limiter.refill_rate,
    )
    uvicorn.run(
        "tokenbucket.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
