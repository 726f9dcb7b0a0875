"""Logging helpers shared by the CLI and the scanners."""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Mapping, Optional

from constants import Constants


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger for console (stderr) output.

    Args:
        level: Level name; falls back to UNIFYVERSIONS_LOG_LEVEL, then INFO.
        log_file: Optional path for an additional timestamped file log.
    """
    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    # same rule as logging.basicConfig: leave existing handlers alone
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)
        logging.getLogger(__name__).debug("Logging to file: %s", log_file)


def set_level(level: Optional[str]) -> None:
    """Apply a level name to the root logger (env/INFO fallback when None)."""
    logging.getLogger().setLevel(_resolve_level(level))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from this logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def log_discovered_files(
    logger: logging.Logger, label: str, discovered: Mapping[str, Iterable[str]]
) -> None:
    """Emit one debug line per discovered file, grouped by kind."""
    if not is_debug_enabled(logger):
        return
    for kind, paths in discovered.items():
        paths = list(paths)
        logger.debug("[%s] discovered %d %s file(s)", label, len(paths), kind)
        for path in paths:
            logger.debug("[%s]   %s", label, path)
