"""
Unit tests for the legacy text reader.
"""

from datetime import datetime
from unittest.mock import patch

import pytest

from myday.errors import StorageError
from myday.models import PriorityLevel, TodoKind
from myday.persistence.legacy_codec import dumps_legacy, load_legacy, loads_legacy


class TestLoadsLegacy:
    """Test parsing of legacy month text."""

    def test_parses_all_fields(self, legacy_record):
        todos = loads_legacy("1\n" + legacy_record("Standup", day=10, hour=9))

        assert len(todos) == 1
        todo = todos[0]
        assert todo.name == "Standup"
        assert todo.label == "work"
        assert todo.level == PriorityLevel.HIGH
        assert todo.todo_time == datetime(2025, 3, 10, 9, 0)
        assert todo.place == "Office"
        assert todo.content == "Agenda\nMinutes"
        assert todo.done is False
        assert todo.kind == TodoKind.TASK
        assert todo.warn_time == 15
        assert todo.order == 0

    def test_multi_line_name(self, legacy_record):
        todos = loads_legacy("1\n" + legacy_record("First line\nSecond line"))
        assert todos[0].name == "First line\nSecond line"

    def test_truncated_stream_returns_complete_records(self, legacy_record):
        records = [legacy_record(f"Item {i}", day=i + 1) for i in range(4)]
        # Header claims five records, the fourth is cut in half
        text = "5\n" + "".join(records[:3]) + "\n".join(records[3].splitlines()[:5]) + "\n"

        todos = loads_legacy(text)

        assert [t.name for t in todos] == ["Item 0", "Item 1", "Item 2"]

    def test_bad_record_stops_parsing(self, legacy_record):
        broken = legacy_record("Broken").replace("2025 3 10 9 0", "2025 3 ten 9 0")
        text = "3\n" + legacy_record("Good", day=1) + broken + legacy_record("Never", day=2)

        assert [t.name for t in loads_legacy(text)] == ["Good"]

    def test_invalid_calendar_date_stops_parsing(self, legacy_record):
        text = "1\n" + legacy_record("Feb", day=31).replace("2025 3 31", "2025 2 31")
        assert loads_legacy(text) == []

    def test_bad_status_line_stops_parsing(self, legacy_record):
        text = "1\n" + legacy_record().replace("false 1 15", "maybe 1 15")
        assert loads_legacy(text) == []

    def test_trailing_blank_lines_and_crlf(self, legacy_record):
        text = ("2\n" + legacy_record("A", day=1) + legacy_record("B", day=2)).replace("\n", "\r\n")
        text += "\r\n\r\n"

        todos = loads_legacy(text)

        assert [t.name for t in todos] == ["A", "B"]
        assert todos[0].content == "Agenda\nMinutes"

    @pytest.mark.parametrize("text", ["", "\n", "not a number\n"])
    def test_unreadable_header_is_empty(self, text):
        assert loads_legacy(text) == []

    @pytest.mark.parametrize("word,expected", [("true", True), ("T", True), ("1", True), ("False", False)])
    def test_go_style_booleans(self, legacy_record, word, expected):
        text = "1\n" + legacy_record().replace("false 1 15", f"{word} 1 15")
        assert loads_legacy(text)[0].done is expected


class TestLoadLegacy:
    """Test reading legacy files from disk."""

    def test_missing_file_is_empty(self, tmp_path):
        assert load_legacy(tmp_path / "202503.txt") == []

    def test_reads_file(self, tmp_path, legacy_record):
        path = tmp_path / "202503.txt"
        path.write_text("1\n" + legacy_record(), encoding="utf-8")
        assert load_legacy(path)[0].name == "Standup"

    def test_os_error_raises_storage_error(self, tmp_path):
        path = tmp_path / "202503.txt"
        path.write_text("0\n", encoding="utf-8")
        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(StorageError) as exc_info:
                load_legacy(path)
        assert exc_info.value.operation == "read legacy file"


class TestDumpsLegacy:
    """Test the legacy writer used for fixtures."""

    def test_output_is_readable(self, sample_todos):
        text = dumps_legacy(sample_todos)

        assert text.startswith("3\n")
        todos = loads_legacy(text)
        assert [t.name for t in todos] == [t.name for t in sample_todos]
        assert todos[2].content == "Line one\nLine two"
        assert todos[1].level == PriorityLevel.URGENT
        # Fields the legacy format does not carry
        assert todos[1].starred is False
        assert todos[1].order == 0
