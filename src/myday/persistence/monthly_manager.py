"""
Monthly manager for MyDay.

This module provides the MonthlyManager class, the stateful facade over
the file store. It caches loaded months, keeps every month in storage
order, and implements the add/update/remove operations used by the user
interface as well as the one-shot legacy migration.
"""

import logging
import threading
from collections import defaultdict
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .. import ordering
from ..errors import MigrationError, StorageError, TodoNotFoundError, TodoValidationError
from ..models.migration_report import MigrationReport
from ..models.todo_item import TodoItem
from .date_key import format_date_key, parse_date_key
from .file_store import FileStore

logger = logging.getLogger(__name__)


def _minute(moment: datetime) -> datetime:
    """Normalise a lookup time the way TodoItem stores times."""
    return moment.replace(tzinfo=None, second=0, microsecond=0)


class MonthlyManager:
    """Cached access to todo items grouped by calendar month.

    All public methods hold an internal re-entrant lock, so the
    load-modify-save sequences of concurrent callers do not interleave.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.file_store = FileStore(data_dir)
        self._cache: Dict[str, List[TodoItem]] = {}
        self._lock = threading.RLock()

    @property
    def data_dir(self) -> Path:
        return self.file_store.data_dir

    @property
    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_todos_for_month(self, year: int, month: int) -> List[TodoItem]:
        """Return the month's items, newest first, loading them on first use.

        The returned list is the cached one; callers that mutate items in
        place persist them with ``save_todos_for_month`` or ``commit_month``.
        """
        date_key = format_date_key(year, month)
        with self._lock:
            cached = self._cache.get(date_key)
            if cached is not None:
                return cached

            todos = ordering.sort_for_storage(self.file_store.load_todos(year, month))
            self._cache[date_key] = todos
            logger.debug("Loaded %d todos for %s", len(todos), date_key)
            return todos

    def save_todos_for_month(self, year: int, month: int, todos: List[TodoItem]) -> None:
        """Persist a month and make ``todos`` the cached list."""
        with self._lock:
            self.file_store.save_todos(year, month, todos)
            self._cache[format_date_key(year, month)] = todos

    def add_todo(self, todo: TodoItem) -> None:
        self._require_name(todo)
        year, month = todo.year_month
        with self._lock:
            todos = list(self.get_todos_for_month(year, month))
            todos.append(todo)
            self.save_todos_for_month(year, month, ordering.sort_for_storage(todos))

    def update_todo(self, todo: TodoItem, original_time: datetime) -> None:
        """Replace the item recorded at ``original_time`` with ``todo``.

        Within a month the existing record is matched on time and name.
        When the time moves to another month the new record is written to
        the target month first, then the original is removed.

        Raises:
            TodoNotFoundError: no record with that time and name exists
                in the original month.
        """
        self._require_name(todo)
        original_time = _minute(original_time)
        year, month = original_time.year, original_time.month

        with self._lock:
            if todo.year_month != (year, month):
                self.add_todo(todo)
                self.remove_todo(original_time)
                return

            todos = list(self.get_todos_for_month(year, month))
            for index, existing in enumerate(todos):
                if existing.todo_time == original_time and existing.name == todo.name:
                    todos[index] = todo
                    break
            else:
                raise TodoNotFoundError("todo item not found for update", original_time)

            self.save_todos_for_month(year, month, ordering.sort_for_storage(todos))

    def remove_todo(self, todo_time: datetime) -> None:
        """Remove the first item at ``todo_time``.

        The month is rewritten even when nothing matched.
        """
        todo_time = _minute(todo_time)
        year, month = todo_time.year, todo_time.month
        with self._lock:
            todos = list(self.get_todos_for_month(year, month))
            for index, existing in enumerate(todos):
                if existing.todo_time == todo_time:
                    del todos[index]
                    break
            self.save_todos_for_month(year, month, todos)

    def remove_todos(self, todo_times: Iterable[datetime]) -> None:
        """Remove every item at any of ``todo_times``, one save per month."""
        by_month: Dict[str, set] = defaultdict(set)
        for todo_time in todo_times:
            todo_time = _minute(todo_time)
            by_month[format_date_key(todo_time.year, todo_time.month)].add(todo_time)

        with self._lock:
            for date_key, times in by_month.items():
                year, month = parse_date_key(date_key)
                todos = self.get_todos_for_month(year, month)
                remaining = [t for t in todos if t.todo_time not in times]
                self.save_todos_for_month(year, month, remaining)

    def get_todo_by_time(self, todo_time: datetime) -> TodoItem:
        todo_time = _minute(todo_time)
        with self._lock:
            for todo in self.get_todos_for_month(todo_time.year, todo_time.month):
                if todo.todo_time == todo_time:
                    return todo
        raise TodoNotFoundError("todo item not found", todo_time)

    def get_all_months(self) -> List[str]:
        return self.file_store.get_all_monthly_files()

    def clear_cache(self) -> None:
        with self._lock:
            self._cache = {}

    # -------- Day view helpers --------
    def get_todos_for_day(self, day: Union[date, datetime]) -> List[TodoItem]:
        """Return every item of ``day`` in display order."""
        with self._lock:
            todos = self.get_todos_for_month(day.year, day.month)
            return ordering.sort_for_display(ordering.todos_for_day(todos, day))

    def reorder_todo(self, todo: TodoItem, delta: int) -> bool:
        """Move an item within its day and renumber the day's items.

        Only the cached items change. Call ``commit_month`` once the
        gesture ends to write them.
        """
        year, month = todo.year_month
        with self._lock:
            day_todos = ordering.todos_for_day(self.get_todos_for_month(year, month), todo.todo_time)
            return ordering.reorder(day_todos, todo, delta)

    def commit_month(self, year: int, month: int) -> None:
        """Write the cached state of a month back to disk."""
        with self._lock:
            self.save_todos_for_month(year, month, self.get_todos_for_month(year, month))

    def latest_todo_time(self) -> Optional[datetime]:
        """Newest item time across all stored months, or None."""
        latest = None
        with self._lock:
            for date_key in self.get_all_months():
                year, month = parse_date_key(date_key)
                for todo in self.get_todos_for_month(year, month):
                    if latest is None or todo.todo_time > latest:
                        latest = todo.todo_time
        return latest

    # -------- Migration --------
    def migrate_all_to_yaml(self) -> MigrationReport:
        """Convert every legacy text month that has no YAML file yet.

        Months that already have a YAML file, cannot be read, or hold no
        items are recorded as skipped. The cache is cleared afterwards.

        Raises:
            MigrationError: a month was parsed but could not be written.
        """
        report = MigrationReport()
        with self._lock:
            try:
                for date_key in self.get_all_months():
                    self._migrate_month(date_key, report)
            finally:
                self.clear_cache()

        logger.info(
            "Migration finished: %d month(s) migrated (%d items), %d skipped",
            len(report.migrated),
            report.total_items,
            len(report.skipped),
        )
        return report

    def _migrate_month(self, date_key: str, report: MigrationReport) -> None:
        year, month = parse_date_key(date_key)
        if year == 0:
            report.record_skipped(date_key, "invalid month key")
            return

        if self.file_store.yaml_exists(year, month):
            report.record_skipped(date_key, "already migrated")
            return

        try:
            todos = self.file_store.load_legacy_todos(year, month)
        except StorageError as e:
            logger.warning("Skipping %s during migration: %s", date_key, e)
            report.record_skipped(date_key, str(e))
            return

        if not todos:
            report.record_skipped(date_key, "no legacy items")
            return

        try:
            self.file_store.save_todos(year, month, todos)
        except StorageError as e:
            raise MigrationError(date_key, str(e)) from e
        report.record_migrated(date_key, len(todos))
        logger.info("Migrated %d todos for %s to YAML", len(todos), date_key)

    @staticmethod
    def _require_name(todo: TodoItem) -> None:
        if not todo.name.strip():
            raise TodoValidationError("todo name must not be empty")
