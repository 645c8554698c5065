"""
Ordering rules for todo items.

Two orderings exist. Storage order (newest first) is applied whenever a
month is loaded or persisted. Display order combines the user-assigned
``order`` field with a time/name tie-break and is what a day view shows.
"""

from datetime import date, datetime, time, timedelta
from functools import cmp_to_key
from typing import Iterable, List, Union

from .models.todo_item import TodoItem


def sort_for_storage(items: Iterable[TodoItem]) -> List[TodoItem]:
    """Return items sorted by ``todo_time`` descending."""
    return sorted(items, key=lambda item: item.todo_time, reverse=True)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_time_then_name(a: TodoItem, b: TodoItem) -> int:
    if a.todo_time != b.todo_time:
        # Newer first
        return _cmp(b.todo_time, a.todo_time)
    return _cmp(a.name, b.name)


def compare_display(a: TodoItem, b: TodoItem) -> int:
    """Three-way comparison implementing the display order.

    Items with an explicit order come first, ascending by order. Items
    without one (``order == 0``) follow. Ties fall back to time
    descending, then name ascending.
    """
    if a.order == 0 and b.order == 0:
        return _compare_time_then_name(a, b)
    if a.order == 0:
        return 1
    if b.order == 0:
        return -1
    if a.order != b.order:
        return _cmp(a.order, b.order)
    return _compare_time_then_name(a, b)


display_key = cmp_to_key(compare_display)


def sort_for_display(items: Iterable[TodoItem]) -> List[TodoItem]:
    """Return items in display order. The sort is stable."""
    return sorted(items, key=display_key)


def todos_for_day(items: Iterable[TodoItem], day: Union[date, datetime]) -> List[TodoItem]:
    """Select the items whose time falls within ``day``."""
    if isinstance(day, datetime):
        day = day.date()
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    return [item for item in items if start <= item.todo_time < end]


def reorder(day_items: List[TodoItem], target: TodoItem, delta: int) -> bool:
    """Move ``target`` by ``delta`` positions and renumber the whole day.

    ``day_items`` must hold every item of the day, not only the visible
    ones. The target is located by time and name. After the move every
    item receives ``order = position + 1``. Nothing is written to disk;
    the caller persists the month once the gesture ends.

    Returns:
        True if the target moved, False for a no-op.
    """
    if delta == 0 or not day_items:
        return False

    ordered = sort_for_display(day_items)
    index = next(
        (i for i, item in enumerate(ordered) if item.same_identity(target)),
        -1,
    )
    if index == -1:
        return False

    new_index = min(max(index + delta, 0), len(ordered) - 1)
    if new_index == index:
        return False

    ordered.insert(new_index, ordered.pop(index))
    for position, item in enumerate(ordered):
        item.order = position + 1
    return True
