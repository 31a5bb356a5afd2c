"""Centralized logging helpers.

Every module logs through ``logging.getLogger(__name__)``; this module only
configures the root logger once and offers small helpers for structured
DEBUG records (``extra=extra_context(...)``) and for keeping URLs safe to log.
"""
from __future__ import annotations

import logging
import os
import sys
import time
import urllib.parse
from typing import Any, Dict, Optional

from constants import Constants

_CONFIGURED = False


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    Level precedence: explicit ``level`` argument, then the
    ``CRATEQUERY_LOG_LEVEL`` environment variable, then WARNING. Calling this
    again only adjusts the level and adds the file handler if requested.

    Args:
        level: Level name such as "DEBUG".
        log_file: Optional path that receives a copy of every record.
    """
    global _CONFIGURED  # pylint: disable=global-statement
    root = logging.getLogger()

    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    if not _CONFIGURED:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
        _CONFIGURED = True

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s " + Constants.LOG_FORMAT))
        root.addHandler(file_handler)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    None values are dropped so records only carry what was actually known.
    """
    return {key: value for key, value in fields.items() if value is not None}


def safe_url(url: str) -> str:
    """Strip credentials, query string and fragment from a URL."""
    try:
        parts = urllib.parse.urlsplit(url)
        port = parts.port
    except ValueError:
        return "<invalid url>"
    netloc = parts.hostname or ""
    if port:
        netloc = f"{netloc}:{port}"
    return urllib.parse.urlunsplit((parts.scheme, netloc, parts.path, "", ""))


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds; usable inside the block as well."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
