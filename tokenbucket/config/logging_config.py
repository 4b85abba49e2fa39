"""
Logging setup for the ``tokenbucket`` logger tree.

Library code only ever calls ``logging.getLogger(__name__)``; handlers
are attached here, by the CLI and server entry points.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.INFO,
    log_file: str = "tokenbucket.log",
) -> None:
    """
    Attach a stdout handler and, if ``log_dir`` is given, a rotating file handler.

    Repeated calls only adjust the level.
    """
    lvl = _resolve_level(level)
    package_logger = logging.getLogger("tokenbucket")
    package_logger.setLevel(lvl)

    if package_logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(formatter)
    package_logger.addHandler(stream)

    if log_dir is None:
        return

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        package_logger.warning("File logging disabled, cannot open %s: %s", log_dir, e)
        return
    rotating.setFormatter(formatter)
    package_logger.addHandler(rotating)
