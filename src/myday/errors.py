"""
Exceptions raised by MyDay storage operations.
"""

from pathlib import Path
from typing import Optional, Union


class MyDayError(Exception):
    """Base class for all MyDay errors."""


class TodoNotFoundError(MyDayError):
    """Raised when an update or lookup target does not exist."""

    def __init__(self, message: str = "todo item not found", todo_time=None):
        super().__init__(message)
        self.todo_time = todo_time


class TodoValidationError(MyDayError):
    """Raised when a todo item cannot be stored as given."""


class StorageError(MyDayError):
    """Raised when a filesystem operation fails.

    Carries the operation name and the path involved; the underlying
    ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, operation: str, path: Optional[Union[str, Path]], message: str):
        self.operation = operation
        self.path = str(path) if path is not None else None
        if self.path:
            super().__init__(f"{operation} failed for {self.path}: {message}")
        else:
            super().__init__(f"{operation} failed: {message}")


class MigrationError(MyDayError):
    """Raised when a parsed legacy month cannot be written back."""

    def __init__(self, date_key: str, message: str):
        super().__init__(f"failed to migrate {date_key} to YAML: {message}")
        self.date_key = date_key
