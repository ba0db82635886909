"""Presentation of tasks as list items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .models import TaskModel

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class TaskItem:
    """A row of the task list as shown to the user."""

    text: str
    checked: bool
    description: str


def format_due_date(due_date: int) -> str:
    """Format a UTC time in milliseconds as e.g. ``Thu, Jun 06, 2024 16:29``.

    Raises ValueError if the time cannot be represented.
    """
    try:
        moment = _EPOCH + timedelta(milliseconds=due_date)
    except OverflowError:
        raise ValueError(f"due date {due_date} is out of range") from None
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} {moment.day:02d}, "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}"
    )


def task_to_item(task: TaskModel) -> TaskItem:
    """Map a task to the list item that displays it."""
    return TaskItem(text=task.title, checked=task.done, description=format_due_date(task.due_date))