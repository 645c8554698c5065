"""
Filesystem access for monthly todo files.

Each month lives in ``<data_dir>/YYYYMM.yaml``. A legacy
``<data_dir>/YYYYMM.txt`` may exist alongside it and is only read when no
YAML file is present.
"""

import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from ..errors import StorageError
from ..models.todo_item import TodoItem
from .date_key import format_date_key, is_date_key
from .legacy_codec import load_legacy
from .yaml_codec import dumps_month, loads_month

logger = logging.getLogger(__name__)

YAML_SUFFIX = ".yaml"
TXT_SUFFIX = ".txt"
TEMP_SUFFIX = ".tmp"


def _fsync_directory(directory: Path) -> None:
    if os.name == "nt":
        return
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_text(path: Union[str, Path], text: str) -> None:
    """Write ``text`` to ``path`` through a sibling temp file and a rename.

    If writing the temp file fails the target is left untouched. If the
    rename fails the temp file is removed. Errors surface as StorageError.
    A failed directory sync after the rename is only logged.
    """
    path = Path(path)
    temp_path = path.with_name(path.name + TEMP_SUFFIX)
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise StorageError("write temp file", temp_path, str(e)) from e

    try:
        os.replace(temp_path, path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise StorageError("rename temp file", path, str(e)) from e

    # The new content is in place once the rename returns
    try:
        _fsync_directory(path.parent)
    except OSError as e:
        logger.warning("Could not sync directory %s after writing %s: %s", path.parent, path.name, e)


class FileStore:
    """Owns the paths and the I/O for monthly data files."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def ensure_data_directory(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("create data directory", self.data_dir, str(e)) from e

    def yaml_path(self, year: int, month: int) -> Path:
        return self.data_dir / f"{format_date_key(year, month)}{YAML_SUFFIX}"

    def txt_path(self, year: int, month: int) -> Path:
        return self.data_dir / f"{format_date_key(year, month)}{TXT_SUFFIX}"

    def get_file_path(self, year: int, month: int) -> Path:
        """Preferred (YAML) path for a month."""
        return self.yaml_path(year, month)

    def save_todos(self, year: int, month: int, todos: Sequence[TodoItem]) -> None:
        """Write a month as YAML. This is the only write path."""
        self.ensure_data_directory()
        path = self.yaml_path(year, month)
        atomic_write_text(path, dumps_month(todos))
        logger.debug("Saved %d todos to %s", len(todos), path)

    def load_todos(self, year: int, month: int) -> List[TodoItem]:
        """Load a month, preferring YAML over the legacy text file.

        An existing YAML file is authoritative even when it cannot be
        decoded; the legacy file is then not consulted.
        """
        path = self.yaml_path(year, month)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self.load_legacy_todos(year, month)
        except UnicodeDecodeError as e:
            logger.warning("YAML file %s is not valid UTF-8, treating it as empty: %s", path, e)
            return []
        except OSError as e:
            raise StorageError("read YAML file", path, str(e)) from e
        return loads_month(text)

    def load_legacy_todos(self, year: int, month: int) -> List[TodoItem]:
        return load_legacy(self.txt_path(year, month))

    def delete_file(self, year: int, month: int) -> None:
        """Remove both candidate files for a month.

        Succeeds when at least one file was removed or neither existed.
        """
        errors = []
        removed = False
        for path in (self.yaml_path(year, month), self.txt_path(year, month)):
            try:
                path.unlink()
                removed = True
            except FileNotFoundError:
                continue
            except OSError as e:
                errors.append((path, e))
        if errors and not removed:
            path, error = errors[0]
            raise StorageError("delete file", path, str(error)) from error

    def yaml_exists(self, year: int, month: int) -> bool:
        return self.yaml_path(year, month).is_file()

    def file_exists(self, year: int, month: int) -> bool:
        return self.yaml_exists(year, month) or self.txt_path(year, month).is_file()

    def get_all_monthly_files(self) -> List[str]:
        """List the ``YYYYMM`` keys that have a data file, in either format."""
        try:
            entries = list(self.data_dir.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError("list data directory", self.data_dir, str(e)) from e

        months = set()
        for entry in entries:
            if entry.suffix not in (YAML_SUFFIX, TXT_SUFFIX) or not entry.is_file():
                continue
            if is_date_key(entry.stem):
                months.add(entry.stem)
        return sorted(months)
