"""
Daily logging utility for MyDay.

This module provides a daily rotating handler that writes one JSON object
per line, attached to the ``myday`` package logger so that every module
logger (``logging.getLogger(__name__)``) reaches it.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "myday"


class DailyJsonFormatter(logging.Formatter):
    """JSON line formatter for daily logs."""

    def __init__(self, component: Optional[str] = None):
        super().__init__()
        self.component = component

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
        }

        if self.component:
            log_record["component"] = self.component

        if hasattr(record, "json_data"):
            log_record.update(record.json_data)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


class DailyLogHandler(TimedRotatingFileHandler):
    """Midnight-rotating file handler with JSON formatting."""

    def __init__(self, log_dir: Union[str, Path], component: str, level: int = logging.INFO):
        component_dir = Path(log_dir) / component
        component_dir.mkdir(parents=True, exist_ok=True)

        super().__init__(
            filename=str(component_dir / f"{component}.log"),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )

        self.setFormatter(DailyJsonFormatter(component=component))
        self.setLevel(level)


def setup_daily_logger(
    component: str, log_dir: Union[str, Path] = "logs", level: int = logging.INFO
) -> logging.Logger:
    """
    Attach a daily JSON handler for ``component`` to the package logger.

    Args:
        component: Component name used for the log subdirectory (e.g. 'cli')
        log_dir: Base log directory (default: 'logs')
        level: Logging level (default: INFO)

    Returns:
        The component logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    # Replace a handler left over from an earlier setup
    for handler in list(package_logger.handlers):
        if isinstance(handler, DailyLogHandler):
            package_logger.removeHandler(handler)
            handler.close()

    package_logger.addHandler(DailyLogHandler(log_dir, component, level))
    package_logger.propagate = False

    return get_daily_logger(component)


def get_daily_logger(component: str) -> logging.Logger:
    """Get the logger of a component."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{component}")
