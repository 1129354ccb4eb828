"""Logging setup for the quantum cube package.

Modules log through ``logging.getLogger(__name__)``. Entry points call
:func:`setup_logging` once to attach handlers; repeated calls with the same
name reuse the existing logger instead of stacking handlers.

Usage:
    from quantum_cube.logging_config import setup_logging

    logger = setup_logging("quantum_cube", level="DEBUG")
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

__all__ = [
    "COMPACT_FORMAT",
    "DEFAULT_FORMAT",
    "DETAILED_FORMAT",
    "get_logger",
    "setup_logging",
]

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
COMPACT_FORMAT = "[%(levelname)s] %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
)


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def setup_logging(
    name: str = "quantum_cube",
    level: int | str = logging.INFO,
    log_file: str | Path | None = None,
    console: bool = True,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure and return the logger ``name``.

    Console output goes to stderr so it never mixes with a text renderer
    drawing on stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))
    formatter = logging.Formatter(fmt)

    if console and not any(
        type(h) is logging.StreamHandler for h in logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file is not None:
        path = Path(log_file)
        if not any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == os.path.abspath(path)
            for h in logger.handlers
        ):
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a package logger; bare names are placed under ``quantum_cube``."""
    if name != "quantum_cube" and not name.startswith("quantum_cube."):
        name = f"quantum_cube.{name}"
    return logging.getLogger(name)
