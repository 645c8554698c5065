"""
Unit tests for the TodoItem model and its enumerations.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from myday.models import PriorityLevel, TodoItem, TodoKind, ViewMode


class TestTodoItem:
    """Test TodoItem defaults, validation and helpers."""

    def test_defaults(self):
        todo = TodoItem(todo_time=datetime(2025, 3, 1, 8, 0))
        assert todo.name == ""
        assert todo.kind == TodoKind.EVENT
        assert todo.level == PriorityLevel.LOW
        assert todo.done is False
        assert todo.starred is False
        assert todo.warn_time == 0
        assert todo.order == 0

    def test_todo_time_is_required(self):
        with pytest.raises(ValidationError):
            TodoItem(name="No time")

    def test_accepts_camel_case_aliases(self):
        todo = TodoItem.model_validate(
            {"name": "Alias", "todoTime": "2025-03-01T08:00:00", "warnTime": 5}
        )
        assert todo.todo_time == datetime(2025, 3, 1, 8, 0)
        assert todo.warn_time == 5

    def test_time_truncated_to_minute_and_naive(self):
        aware = datetime(2025, 3, 1, 8, 15, 42, 1234, tzinfo=timezone(timedelta(hours=8)))
        todo = TodoItem(todo_time=aware)
        assert todo.todo_time == datetime(2025, 3, 1, 8, 15)
        assert todo.todo_time.tzinfo is None

    def test_set_level_rejects_out_of_range(self):
        todo = TodoItem(todo_time=datetime(2025, 3, 1), level=2)
        todo.set_level(7)
        assert todo.level == PriorityLevel.HIGH
        todo.set_level(-1)
        assert todo.level == PriorityLevel.HIGH
        todo.set_level(3)
        assert todo.level == PriorityLevel.URGENT

    def test_unknown_stored_level_falls_back_to_low(self):
        todo = TodoItem(todo_time=datetime(2025, 3, 1), level=9)
        assert todo.level == PriorityLevel.LOW

    def test_non_event_kind_is_task(self):
        assert TodoItem(todo_time=datetime(2025, 3, 1), kind=4).kind == TodoKind.TASK
        assert TodoItem(todo_time=datetime(2025, 3, 1), kind=0).kind == TodoKind.EVENT

    def test_negative_order_and_warn_time_clamped(self):
        todo = TodoItem(todo_time=datetime(2025, 3, 1), order=-3, warn_time=-10)
        assert todo.order == 0
        assert todo.warn_time == 0

    def test_labels(self):
        todo = TodoItem(todo_time=datetime(2025, 3, 1), kind=1, level=3)
        assert todo.kind_label == "Task"
        assert todo.level_label == "Important - Urgent"
        assert PriorityLevel.MEDIUM.short_label == "Medium"

    def test_same_identity_uses_time_and_name(self):
        when = datetime(2025, 3, 1, 9, 0)
        a = TodoItem(name="A", todo_time=when, done=True)
        assert a.same_identity(TodoItem(name="A", todo_time=when))
        assert not a.same_identity(TodoItem(name="B", todo_time=when))


class TestShouldRemind:
    """Test reminder eligibility."""

    @pytest.fixture
    def todo(self):
        return TodoItem(name="Meeting", todo_time=datetime(2025, 3, 1, 10, 0), warn_time=15)

    def test_inside_window(self, todo):
        assert todo.should_remind(datetime(2025, 3, 1, 9, 50))

    def test_window_bounds_are_exclusive(self, todo):
        assert not todo.should_remind(datetime(2025, 3, 1, 9, 45))
        assert not todo.should_remind(datetime(2025, 3, 1, 10, 0))

    def test_no_reminder_when_disabled_or_done(self, todo):
        todo.warn_time = 0
        assert not todo.should_remind(datetime(2025, 3, 1, 9, 50))
        todo.warn_time = 15
        todo.done = True
        assert not todo.should_remind(datetime(2025, 3, 1, 9, 50))


class TestViewMode:
    """Test view mode filtering."""

    @pytest.fixture
    def items(self):
        when = datetime(2025, 3, 1, 9, 0)
        return [
            TodoItem(name="open", todo_time=when),
            TodoItem(name="closed", todo_time=when, done=True),
            TodoItem(name="star", todo_time=when, starred=True),
        ]

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (ViewMode.ALL, ["open", "closed", "star"]),
            (ViewMode.INCOMPLETE, ["open", "star"]),
            (ViewMode.COMPLETE, ["closed"]),
            (ViewMode.STARRED, ["star"]),
        ],
    )
    def test_filter_items(self, items, mode, expected):
        assert [t.name for t in mode.filter_items(items)] == expected

    def test_next_mode_cycles(self):
        assert ViewMode.ALL.next_mode() == ViewMode.INCOMPLETE
        assert ViewMode.STARRED.next_mode() == ViewMode.ALL

    def test_from_name(self):
        assert ViewMode.from_name("starred") == ViewMode.STARRED
        assert ViewMode.STARRED.label == "Important"
        with pytest.raises(ValueError):
            ViewMode.from_name("recent")
