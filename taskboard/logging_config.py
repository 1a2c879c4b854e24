"""
Logging setup for the taskboard service.

Format: LEVEL: timestamp : module.function.lineno : message
Example: INFO: 2026-02-17 13:01:23 : taskboard.services.task_mutation.create_task.41 : Created task ...

Usage:
    from taskboard.logging_config import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config import LOG_LEVEL


class TaskboardFormatter(logging.Formatter):
    """Single-line formatter: LEVEL: timestamp : location : message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

        filename = record.filename
        if filename.endswith(".py"):
            filename = filename[:-3]

        # Module names already end with the filename for our own loggers
        module = record.name
        if module.endswith(f".{filename}") or module == filename:
            location = f"{module}.{record.funcName}.{record.lineno}"
        else:
            location = f"{module}.{filename}.{record.funcName}.{record.lineno}"

        message = f"{record.levelname}: {timestamp} : {location} : {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: Optional[int] = None, stream: Optional[object] = None) -> None:
    """
    Configure root logging. Call once at application startup.

    Args:
        level: Logging level (default: LOG_LEVEL from config, fallback INFO)
        stream: Output stream (default: sys.stdout)
    """
    if level is None:
        level = getattr(logging, LOG_LEVEL, logging.INFO)
    if stream is None:
        stream = sys.stdout

    handler = logging.StreamHandler(stream)
    handler.setFormatter(TaskboardFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger("taskboard").setLevel(level)

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)
