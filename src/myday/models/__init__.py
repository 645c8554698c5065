"""
Data models for MyDay.

This module provides the todo item, enumerations and configuration models.
"""

from .priority import PriorityLevel, TodoKind
from .todo_item import TodoItem
from .view_mode import ViewMode
from .app_config import AppConfig, UIConfig
from .migration_report import MigrationReport

__all__ = [
    "PriorityLevel",
    "TodoKind",
    "TodoItem",
    "ViewMode",
    "AppConfig",
    "UIConfig",
    "MigrationReport",
]
