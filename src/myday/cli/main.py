import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import typer

from myday.config import ConfigManager
from myday.errors import MyDayError
from myday.models import PriorityLevel, TodoItem, TodoKind, ViewMode
from myday.persistence import MonthlyManager
from myday.utils import setup_daily_logger

app = typer.Typer(help="Manage the My Day monthly todo files.")

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M"


def _parse_at(value: str) -> datetime:
    try:
        return datetime.strptime(value.strip(), TIME_FORMAT)
    except ValueError:
        raise typer.BadParameter(f"expected 'YYYY-MM-DD HH:MM', got {value!r}") from None


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _manager(ctx: typer.Context) -> MonthlyManager:
    return ctx.obj["manager"]


def _format_todo(todo: TodoItem) -> str:
    check = "x" if todo.done else " "
    star = "*" if todo.starred else " "
    order = f" #{todo.order}" if todo.order else ""
    return (
        f"{todo.todo_time.strftime(TIME_FORMAT)} [{check}] {star} {todo.name}"
        f" ({todo.kind_label}, {todo.level.short_label}){order}"
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(None, help="Directory holding the monthly files"),
    log_dir: Optional[Path] = typer.Option(None, help="Write daily JSON logs to this directory"),
):
    """Open the data directory and run the start-up migration."""
    settings = ConfigManager(data_dir=data_dir, log_dir=log_dir).get_config()

    if settings.log_dir:
        setup_daily_logger("cli", settings.log_dir, settings.log_level_number)
    else:
        logging.basicConfig(level=settings.log_level_number)

    manager = MonthlyManager(settings.data_dir)
    try:
        manager.file_store.ensure_data_directory()
    except MyDayError as e:
        _fail(str(e))
    ctx.obj = {"settings": settings, "manager": manager}

    if settings.migrate_on_startup and ctx.invoked_subcommand != "migrate":
        try:
            manager.migrate_all_to_yaml()
        except MyDayError as e:
            # Start-up migration never blocks the requested command
            logger.warning("Start-up migration failed: %s", e)


@app.command()
def months(ctx: typer.Context):
    """List the months that have data files."""
    try:
        keys = _manager(ctx).get_all_months()
    except MyDayError as e:
        _fail(str(e))
    if not keys:
        print("No monthly data found.")
        return
    for key in keys:
        print(key)


@app.command("list")
def list_todos(
    ctx: typer.Context,
    year: int = typer.Argument(..., help="Year, e.g. 2025"),
    month: int = typer.Argument(..., min=1, max=12, help="Month 1-12"),
    day: Optional[int] = typer.Option(None, min=1, max=31, help="Show a single day in display order"),
    view: str = typer.Option("all", help="all, incomplete, complete or starred"),
):
    """List the todos of a month, or of one day."""
    try:
        mode = ViewMode.from_name(view)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    manager = _manager(ctx)
    try:
        if day is None:
            todos = manager.get_todos_for_month(year, month)
        else:
            todos = manager.get_todos_for_day(date(year, month, day))
    except ValueError as e:
        _fail(str(e))
    except MyDayError as e:
        _fail(str(e))

    todos = mode.filter_items(todos)
    if not todos:
        print("No todos.")
        return
    for todo in todos:
        print(_format_todo(todo))


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Todo name"),
    at: str = typer.Option(..., help="Due time, 'YYYY-MM-DD HH:MM'"),
    content: str = typer.Option("", help="Details"),
    place: str = typer.Option("", help="Location"),
    label: str = typer.Option("", help="Custom label"),
    kind: str = typer.Option("event", help="event or task"),
    level: int = typer.Option(0, min=0, max=3, help="Priority 0 (low) to 3 (urgent)"),
    warn: int = typer.Option(0, min=0, help="Reminder, minutes before the due time"),
    starred: bool = typer.Option(False, help="Mark as important"),
):
    """Add a todo."""
    try:
        todo_kind = TodoKind[kind.strip().upper()]
    except KeyError:
        raise typer.BadParameter(f"kind must be 'event' or 'task', got {kind!r}") from None

    todo = TodoItem(
        name=name,
        content=content,
        place=place,
        label=label,
        kind=todo_kind,
        level=PriorityLevel(level),
        todo_time=_parse_at(at),
        warn_time=warn,
        starred=starred,
    )
    try:
        _manager(ctx).add_todo(todo)
    except MyDayError as e:
        _fail(str(e))
    print(f"Added: {_format_todo(todo)}")


@app.command()
def done(
    ctx: typer.Context,
    at: str = typer.Argument(..., help="Time of the todo, 'YYYY-MM-DD HH:MM'"),
    undo: bool = typer.Option(False, "--undo", help="Mark as not done instead"),
):
    """Mark the todo at a given time as done."""
    manager = _manager(ctx)
    try:
        todo = manager.get_todo_by_time(_parse_at(at))
        updated = todo.model_copy(update={"done": not undo})
        manager.update_todo(updated, todo.todo_time)
    except MyDayError as e:
        _fail(str(e))
    print(f"Updated: {_format_todo(updated)}")


@app.command()
def remove(
    ctx: typer.Context,
    at: List[str] = typer.Argument(..., help="Times of the todos to remove"),
):
    """Remove the todos at the given times."""
    times = [_parse_at(value) for value in at]
    try:
        _manager(ctx).remove_todos(times)
    except MyDayError as e:
        _fail(str(e))
    print(f"Removed {len(times)} todo(s).")


@app.command()
def move(
    ctx: typer.Context,
    at: str = typer.Argument(..., help="Time of the todo, 'YYYY-MM-DD HH:MM'"),
    by: int = typer.Option(..., "--by", help="Positions to move; negative moves up"),
):
    """Move a todo up or down within its day."""
    manager = _manager(ctx)
    try:
        todo = manager.get_todo_by_time(_parse_at(at))
        moved = manager.reorder_todo(todo, by)
        if moved:
            manager.commit_month(todo.todo_time.year, todo.todo_time.month)
    except MyDayError as e:
        _fail(str(e))

    if not moved:
        print("Nothing to move.")
        return
    for item in manager.get_todos_for_day(todo.todo_time):
        print(_format_todo(item))


@app.command()
def migrate(ctx: typer.Context):
    """Convert legacy text months to YAML."""
    try:
        report = _manager(ctx).migrate_all_to_yaml()
    except MyDayError as e:
        _fail(str(e))

    for key, count in report.migrated.items():
        print(f"Migrated {key}: {count} todo(s)")
    for key, reason in report.skipped.items():
        print(f"Skipped {key}: {reason}")
    print(f"Migration complete: {len(report.migrated)} month(s), {report.total_items} todo(s).")


if __name__ == "__main__":
    app()
