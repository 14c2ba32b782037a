"""Logging setup for bintally.

The package logger carries only a NullHandler until one of these helpers
attaches a real handler. ``bintally -v`` calls ``enable_console_logging``;
every CLI run calls ``configure_from_env`` first.

Environment variables:
    BT_LOGGING: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    BT_LOG_FILE: Rotating log file path
    BT_LOG_JSON: "1" to emit one JSON object per record
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
]

LOGGER_NAME = "bintally"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, exception."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _resolve_level(level: LogLevel | int) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _install(handler: logging.Handler, level: LogLevel | int, json_format: bool) -> logging.Handler:
    """Attach ``handler`` to the package logger at ``level``."""
    numeric = _resolve_level(level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    handler.setLevel(numeric)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(numeric)
    package_logger.addHandler(handler)
    return handler


def enable_console_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log plain-text records to stderr."""
    return _install(logging.StreamHandler(), level, json_format=False)


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log JSON records to stderr."""
    return _install(logging.StreamHandler(), level, json_format=True)


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    json_format: bool = False,
) -> RotatingFileHandler:
    """Log to ``path``, rotating at ``max_bytes`` and keeping ``backup_count`` old files.

    Missing parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    return _install(handler, level, json_format)


def configure_from_env() -> logging.Handler | None:
    """Attach a handler described by the BT_* variables.

    Returns the handler, or None when neither BT_LOGGING nor BT_LOG_FILE is set.
    """
    level = os.environ.get("BT_LOGGING") or None
    log_file = os.environ.get("BT_LOG_FILE") or None
    if level is None and log_file is None:
        return None

    level = level or "INFO"
    as_json = os.environ.get("BT_LOG_JSON") == "1"
    if log_file is not None:
        return enable_file_logging(log_file, level=level, json_format=as_json)
    if as_json:
        return enable_json_logging(level=level)
    return enable_console_logging(level=level)
