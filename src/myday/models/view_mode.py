"""
View modes used to filter a day's todo items.
"""

from enum import IntEnum
from typing import Iterable

from .todo_item import TodoItem


class ViewMode(IntEnum):
    """Filter applied to the items shown for a day."""

    ALL = 0
    INCOMPLETE = 1
    COMPLETE = 2
    STARRED = 3

    @property
    def label(self) -> str:
        return _VIEW_LABELS[self]

    def accepts(self, item: TodoItem) -> bool:
        if self is ViewMode.INCOMPLETE:
            return not item.done
        if self is ViewMode.COMPLETE:
            return item.done
        if self is ViewMode.STARRED:
            return item.starred
        return True

    def filter_items(self, items: Iterable[TodoItem]) -> list[TodoItem]:
        return [item for item in items if self.accepts(item)]

    def next_mode(self) -> "ViewMode":
        """Cycle All -> Incomplete -> Complete -> Starred -> All."""
        return ViewMode((self.value + 1) % len(ViewMode))

    @classmethod
    def from_name(cls, name: str) -> "ViewMode":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown view mode: {name}") from None


_VIEW_LABELS = {
    ViewMode.ALL: "All",
    ViewMode.INCOMPLETE: "Incomplete",
    ViewMode.COMPLETE: "Complete",
    ViewMode.STARRED: "Important",
}
