"""
Reader for the legacy line-oriented monthly text format.

Layout of a ``YYYYMM.txt`` file::

    <item count>
    per item:
      <n> + n lines   name
      <n> + n lines   label
      <level>
      <year> <month> <day> <hour> <minute>
      <n> + n lines   place
      <n> + n lines   content
      <done> <kind> <warnTime>

The format is read-only for the application. ``dumps_legacy`` exists so
fixtures and tooling can produce files in the old layout.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from ..errors import StorageError
from ..models.todo_item import TodoItem

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}


class LegacyFormatError(ValueError):
    """A record in a legacy file could not be parsed."""


class _LineReader:
    """Sequential access to the lines of a legacy file."""

    def __init__(self, text: str):
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        self._pos = 0

    def has_next(self) -> bool:
        return self._pos < len(self._lines)

    def next(self, what: str) -> str:
        if not self.has_next():
            raise LegacyFormatError(f"unexpected end of file reading {what}")
        line = self._lines[self._pos]
        self._pos += 1
        return line


def _parse_int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise LegacyFormatError(f"invalid {what}: {value!r}") from None


def _parse_bool(value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise LegacyFormatError(f"invalid boolean: {value!r}")


def _read_block(reader: _LineReader, what: str) -> str:
    count = _parse_int(reader.next(f"{what} line count"), f"{what} line count")
    lines = []
    # A short block at end of file is kept as is
    while len(lines) < count and reader.has_next():
        lines.append(reader.next(what))
    return "\n".join(lines)


def _read_item(reader: _LineReader) -> TodoItem:
    name = _read_block(reader, "name")
    label = _read_block(reader, "label")
    level = _parse_int(reader.next("level"), "level")

    stamp = reader.next("date/time")
    parts = stamp.split()
    if len(parts) != 5:
        raise LegacyFormatError(f"invalid date format: {stamp!r}")
    year, month, day, hour, minute = (_parse_int(p, "date component") for p in parts)
    try:
        todo_time = datetime(year, month, day, hour, minute)
    except ValueError as e:
        raise LegacyFormatError(f"invalid date {stamp!r}: {e}") from None

    place = _read_block(reader, "place")
    content = _read_block(reader, "content")

    status = reader.next("status")
    parts = status.split()
    if len(parts) != 3:
        raise LegacyFormatError(f"invalid status format: {status!r}")
    done = _parse_bool(parts[0])
    kind = _parse_int(parts[1], "kind")
    warn_time = _parse_int(parts[2], "warn time")

    try:
        return TodoItem(
            name=name,
            label=label,
            level=level,
            todo_time=todo_time,
            place=place,
            content=content,
            done=done,
            kind=kind,
            warn_time=warn_time,
        )
    except ValidationError as e:
        raise LegacyFormatError(str(e)) from None


def loads_legacy(text: str) -> List[TodoItem]:
    """Parse legacy text, keeping every record read before the first error."""
    reader = _LineReader(text)
    if not reader.has_next():
        return []
    try:
        count = int(reader.next("count").strip())
    except ValueError:
        logger.warning("Legacy data has no readable item count, ignoring it")
        return []

    items: List[TodoItem] = []
    for index in range(count):
        try:
            items.append(_read_item(reader))
        except LegacyFormatError as e:
            logger.warning(
                "Stopped reading legacy data at record %d of %d: %s",
                index + 1,
                count,
                e,
            )
            break
    return items


def load_legacy(path: Union[str, Path]) -> List[TodoItem]:
    """Read a legacy monthly file. A missing file yields an empty list."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return []
    except OSError as e:
        raise StorageError("read legacy file", path, str(e)) from e
    return loads_legacy(text)


def _block(value: str) -> List[str]:
    return [str(value.count("\n") + 1), value]


def dumps_legacy(items: Iterable[TodoItem]) -> str:
    """Render items in the legacy layout."""
    items = list(items)
    lines = [str(len(items))]
    for item in items:
        t = item.todo_time
        lines += _block(item.name)
        lines += _block(item.label)
        lines.append(str(int(item.level)))
        lines.append(f"{t.year} {t.month} {t.day} {t.hour} {t.minute}")
        lines += _block(item.place)
        lines += _block(item.content)
        lines.append(f"{str(item.done).lower()} {int(item.kind)} {item.warn_time}")
    return "\n".join(lines) + "\n"
