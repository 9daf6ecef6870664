# src/logging/logger.py — v1
"""Log record formatting and handler wiring for the pagecontext logger tree.

Every module logs through ``logging.getLogger(__name__)``; only the
``pagecontext`` root logger carries handlers.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pagecontext.logging.context import get_context

if TYPE_CHECKING:
    from pagecontext.config.settings import Settings

ROOT_LOGGER_NAME = "pagecontext"

_SIZE_PATTERN = re.compile(r"^(\d+)\s*([KMG]?B)$", re.IGNORECASE)
_SIZE_SHIFTS = {"B": 0, "KB": 10, "MB": 20, "GB": 30}


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with request context and extra data."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _record_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = get_context().as_dict()
        if context:
            entry["context"] = context

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line console format: time, level, logger, request, stage."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        line = (
            f"{_record_time(record):%Y-%m-%d %H:%M:%S} "
            f"[{record.levelname:8s}] {record.name}"
        )
        if ctx.request_id:
            line += f" [{ctx.request_id}]"
        if ctx.stage:
            line += f" ({ctx.stage})"
        line += f" - {record.getMessage()}"

        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | Path | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Logger:
    """Install handlers on the pagecontext root logger.

    Re-running replaces the previous handlers rather than stacking them.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_format: "json" or "text".
        log_file: Optional rotating log file, in addition to stderr.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    formatter: logging.Formatter = (
        JsonFormatter() if log_format == "json" else TextFormatter()
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_file:
        file_handler = file_handler_for(log_file, rotation=rotation, retention=retention)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_settings(
    settings: Settings,
    level: str | None = None,
    log_format: str | None = None,
) -> logging.Logger:
    """Configure logging from Settings, with optional per-run overrides."""
    return setup_logging(
        level=level or settings.log_level,
        log_format=log_format or settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


def parse_size(size: str) -> int:
    """Bytes in a rotation size such as ``"512KB"`` or ``"10 mb"``."""
    match = _SIZE_PATTERN.match(size.strip())
    if match is None:
        raise ValueError(f"Invalid log rotation size {size!r}, expected e.g. '10MB'")
    count, unit = match.groups()
    return int(count) << _SIZE_SHIFTS[unit.upper()]


def file_handler_for(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> RotatingFileHandler:
    """Size-rotated UTF-8 file handler; missing parent directories are created."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path, maxBytes=parse_size(rotation), backupCount=retention, encoding="utf-8",
    )
