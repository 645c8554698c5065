"""
Utilities for MyDay.
"""

from .daily_logger import DailyJsonFormatter, DailyLogHandler, get_daily_logger, setup_daily_logger

__all__ = ["DailyJsonFormatter", "DailyLogHandler", "get_daily_logger", "setup_daily_logger"]
