"""
Todo item model for MyDay.

This module provides the TodoItem model shared by the storage layer and
the user interface.
"""

from datetime import datetime, timedelta
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .priority import PriorityLevel, TodoKind


class TodoItem(BaseModel):
    """A single event or task scheduled at a given minute."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    content: str = ""
    place: str = ""
    label: str = ""
    kind: TodoKind = TodoKind.EVENT
    level: PriorityLevel = PriorityLevel.LOW
    # Files written by the desktop app use lowercased keys
    todo_time: datetime = Field(
        ...,
        alias="todoTime",
        validation_alias=AliasChoices("todoTime", "todotime", "todo_time"),
    )
    done: bool = False
    warn_time: int = Field(
        default=0,
        alias="warnTime",
        validation_alias=AliasChoices("warnTime", "warntime", "warn_time"),
    )
    starred: bool = False
    order: int = 0

    @field_validator("todo_time")
    @classmethod
    def truncate_to_minute(cls, v: datetime) -> datetime:
        """Keep the wall clock, drop any offset and sub-minute precision."""
        return v.replace(tzinfo=None, second=0, microsecond=0)

    @field_validator("level", mode="before")
    @classmethod
    def default_unknown_level(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool) and not PriorityLevel.is_valid(v):
            return PriorityLevel.LOW
        return v

    @field_validator("kind", mode="before")
    @classmethod
    def collapse_kind(cls, v: Any) -> Any:
        # Anything that is not an event is a task
        if isinstance(v, int) and not isinstance(v, bool) and v != TodoKind.EVENT:
            return TodoKind.TASK
        return v

    @field_validator("warn_time", "order", mode="before")
    @classmethod
    def non_negative(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool) and v < 0:
            return 0
        return v

    def set_level(self, level: int) -> None:
        """Set the priority, ignoring values outside 0..3."""
        if PriorityLevel.is_valid(level):
            self.level = PriorityLevel(level)

    @property
    def year_month(self) -> tuple[int, int]:
        return self.todo_time.year, self.todo_time.month

    @property
    def kind_label(self) -> str:
        return self.kind.label

    @property
    def level_label(self) -> str:
        return self.level.label

    def same_identity(self, other: "TodoItem") -> bool:
        """True when both items share the time + name composite key."""
        return self.todo_time == other.todo_time and self.name == other.name

    def should_remind(self, now: datetime) -> bool:
        """Check whether a reminder is due at ``now``.

        A reminder fires strictly between ``warn_time`` minutes before the
        due time and the due time itself, and never for finished items.
        """
        if self.warn_time == 0 or self.done:
            return False
        remind_at = self.todo_time - timedelta(minutes=self.warn_time)
        now = now.replace(tzinfo=None)
        return remind_at < now < self.todo_time
