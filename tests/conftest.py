"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from myday.models import TodoItem
from myday.persistence import FileStore, MonthlyManager


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep MYDAY_ variables and a stray .env out of the tests."""
    for name in ("MYDAY_DATA_DIR", "MYDAY_LOG_DIR", "MYDAY_LOG_LEVEL", "MYDAY_MIGRATE_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory that does not exist yet."""
    return tmp_path / "data"


@pytest.fixture
def file_store(data_dir: Path) -> FileStore:
    return FileStore(data_dir)


@pytest.fixture
def manager(data_dir: Path) -> MonthlyManager:
    return MonthlyManager(data_dir)


def _make_todo(name: str, when: str, **fields: Any) -> TodoItem:
    return TodoItem(name=name, todo_time=datetime.strptime(when, "%Y-%m-%d %H:%M"), **fields)


@pytest.fixture
def make_todo():
    """Build a TodoItem from a name and a 'YYYY-MM-DD HH:MM' string."""
    return _make_todo


@pytest.fixture
def sample_todos() -> list[TodoItem]:
    """Three March 2025 items, newest first."""
    return [
        _make_todo(
            "Dentist",
            "2025-03-20 14:30",
            content="Bring insurance card",
            place="Main St 5",
            label="health",
            kind=0,
            level=2,
            warn_time=30,
        ),
        _make_todo("Write report", "2025-03-15 10:00", kind=1, level=3, starred=True, order=2),
        _make_todo("Call mum", "2025-03-15 09:00", done=True, content="Line one\nLine two"),
    ]


LEGACY_RECORD = """{name_lines}
{name}
1
work
2
2025 3 {day} {hour} 0
1
Office
2
Agenda
Minutes
false 1 15
"""


def _legacy_record(name: str = "Standup", day: int = 10, hour: int = 9) -> str:
    return LEGACY_RECORD.format(name_lines=name.count("\n") + 1, name=name, day=day, hour=hour)


@pytest.fixture
def legacy_record():
    """Render one well-formed legacy record for March 2025."""
    return _legacy_record


@pytest.fixture
def legacy_file_factory(data_dir: Path):
    """Write a legacy ``YYYYMM.txt`` file from raw text."""

    def _write(date_key: str, text: str) -> Path:
        data_dir.mkdir(parents=True, exist_ok=True)
        path = data_dir / f"{date_key}.txt"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def pytest_configure(config: Any) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "cli: mark test as command line test")


def pytest_collection_modifyitems(config: Any, items: list[Any]) -> None:
    """Add markers based on file location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "cli" in path:
            item.add_marker(pytest.mark.cli)
