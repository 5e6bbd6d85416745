"""Unified logging configuration for Knight Zones.

Library modules only ever call ``logging.getLogger(__name__)``; entry points
(the HTTP service and the self-play script) call :func:`setup_logging` once
to attach handlers.

Usage:
    from knight_zones.core.logging_config import setup_logging

    logger = setup_logging("run_selfplay", level="DEBUG", format_style="compact")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname)s %(name)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d - %(message)s"
)
STRUCTURED_FORMAT = (
    '{"time": "%(asctime)s", "logger": "%(name)s", '
    '"level": "%(levelname)s", "message": "%(message)s"}'
)

_FORMATS = {
    "default": DEFAULT_FORMAT,
    "compact": COMPACT_FORMAT,
    "detailed": DETAILED_FORMAT,
    "structured": STRUCTURED_FORMAT,
}

NOISY_PACKAGES = (
    "urllib3",
    "httpx",
    "httpcore",
    "asyncio",
    "uvicorn.access",
    "multipart",
)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    name: str,
    level: int | str = logging.INFO,
    log_file: str | Path | None = None,
    log_dir: str | Path | None = None,
    console: bool = True,
    format_style: str = "default",
    propagate: bool = False,
) -> logging.Logger:
    """Configure and return the logger called ``name``.

    Calling this twice for the same name does not stack handlers: a handler
    of a given kind (console, or file for a given path) is only attached once.

    Args:
        name: Logger name.
        level: Level as an int or a name such as ``"DEBUG"``.
        log_file: Explicit log file path.
        log_dir: Directory in which ``<name>.log`` is created when
            ``log_file`` is not given.
        console: Attach a stderr handler.
        format_style: One of ``default``, ``compact``, ``detailed``,
            ``structured``; unknown styles fall back to ``default``.
        propagate: Whether records also reach ancestor loggers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.propagate = propagate

    formatter = logging.Formatter(_FORMATS.get(format_style, DEFAULT_FORMAT))

    if console and not any(
        type(h) is logging.StreamHandler for h in logger.handlers
    ):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is None and log_dir is not None:
        log_file = Path(log_dir) / f"{name.replace('.', '_')}.log"

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        already_attached = any(
            isinstance(h, logging.FileHandler)
            and Path(h.baseFilename) == path.resolve()
            for h in logger.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger called ``name`` without touching its handlers."""
    return logging.getLogger(name)


def configure_third_party_loggers(
    quiet: bool = True,
    verbose_packages: Iterable[str] | None = None,
) -> None:
    """Raise noisy dependency loggers to WARNING.

    Packages listed in ``verbose_packages`` keep their current level.
    """
    if not quiet:
        return
    keep = set(verbose_packages or ())
    for package in NOISY_PACKAGES:
        if package in keep:
            continue
        logging.getLogger(package).setLevel(logging.WARNING)


class LogContext:
    """Temporarily change a logger's level inside a ``with`` block."""

    def __init__(self, logger: logging.Logger, level: int | str):
        self.logger = logger
        self.level = _resolve_level(level)
        self._previous = logger.level

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        self.logger.setLevel(self._previous)
