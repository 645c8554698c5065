"""
Priority and kind enumerations for todo items.
"""

from enum import IntEnum


class PriorityLevel(IntEnum):
    """Eisenhower-style priority of a todo item."""

    LOW = 0  # Not Important - Not Urgent
    MEDIUM = 1  # Not Important - Urgent
    HIGH = 2  # Important - Not Urgent
    URGENT = 3  # Important - Urgent

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]

    @property
    def short_label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def is_valid(cls, value: int) -> bool:
        return value in cls._value2member_map_


_LEVEL_LABELS = {
    PriorityLevel.LOW: "Not Important - Not Urgent",
    PriorityLevel.MEDIUM: "Not Important - Urgent",
    PriorityLevel.HIGH: "Important - Not Urgent",
    PriorityLevel.URGENT: "Important - Urgent",
}


class TodoKind(IntEnum):
    """Whether an item is a scheduled event or a task."""

    EVENT = 0
    TASK = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()
