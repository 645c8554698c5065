"""
Persistence layer for MyDay.

This module provides monthly todo storage, the legacy text reader, the
YAML codec and configuration persistence.
"""

from .date_key import format_date_key, parse_date_key, date_key_for, is_date_key
from .file_store import FileStore, atomic_write_text
from .monthly_manager import MonthlyManager
from .config_store import ConfigStore

__all__ = [
    "format_date_key",
    "parse_date_key",
    "date_key_for",
    "is_date_key",
    "FileStore",
    "atomic_write_text",
    "MonthlyManager",
    "ConfigStore",
]
