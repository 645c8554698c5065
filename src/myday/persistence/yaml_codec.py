"""
YAML encoding of a month's todo items.

Documents are written as ``{version: 1, todos: [...]}``. Reading accepts
that wrapper or a bare list of items and degrades to an empty list when
neither shape validates.
"""

import logging
from typing import Any, List, Optional, Sequence

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..models.todo_item import TodoItem

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_todo_list = TypeAdapter(List[TodoItem])


class MonthlyDocument(BaseModel):
    """Wrapped on-disk shape of one month."""

    version: int = FORMAT_VERSION
    todos: Optional[List[TodoItem]] = None


def todo_to_dict(item: TodoItem) -> dict[str, Any]:
    data = item.model_dump(mode="json", by_alias=True)
    if not data.get("order"):
        data.pop("order", None)
    return data


def dumps_month(items: Sequence[TodoItem]) -> str:
    document = {
        "version": FORMAT_VERSION,
        "todos": [todo_to_dict(item) for item in items],
    }
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def _decode_wrapped(data: Any) -> Optional[List[TodoItem]]:
    if not isinstance(data, dict):
        return None
    try:
        return MonthlyDocument.model_validate(data).todos
    except ValidationError as e:
        logger.debug("Document is not a wrapped month: %s", e)
        return None


def _decode_bare_list(data: Any) -> Optional[List[TodoItem]]:
    try:
        return _todo_list.validate_python(data)
    except ValidationError as e:
        logger.debug("Document is not a bare todo list: %s", e)
        return None


def loads_month(text: str) -> List[TodoItem]:
    """Decode a month document, returning ``[]`` when it cannot be read."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning("Unparseable YAML month document: %s", e)
        return []

    todos = _decode_wrapped(data)
    if todos is None:
        todos = _decode_bare_list(data)
    if todos is None:
        logger.warning("Month document matches no known shape, treating it as empty")
        return []
    return todos
