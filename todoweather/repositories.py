"""Repository interfaces and in-memory implementations."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .models import DateModel, TaskModel, TimeModel


class DateTimeRepository(ABC):
    """Source of the current date and time and their textual forms."""

    @abstractmethod
    def current_date(self) -> DateModel:
        """Return today's date."""

    @abstractmethod
    def current_time(self) -> TimeModel:
        """Return the current time."""

    @abstractmethod
    def date_to_string(self, date: DateModel) -> str:
        """Format a date for display."""

    @abstractmethod
    def time_to_string(self, time: TimeModel) -> str:
        """Format a time for display."""

    @abstractmethod
    def time_stamp(self, date: DateModel, time: TimeModel) -> int:
        """Return a time stamp for the given date and time."""


class TaskRepository(ABC):
    """Storage of tasks addressed by position."""

    @abstractmethod
    def task_count(self) -> int:
        """Return the number of stored tasks."""

    @abstractmethod
    def get_task(self, index: int) -> Optional[TaskModel]:
        """Return the task at ``index`` or None if out of range."""

    @abstractmethod
    def toggle_done(self, index: int) -> bool:
        """Flip the done flag; return False if ``index`` is out of range."""

    @abstractmethod
    def remove_task(self, index: int) -> bool:
        """Remove a task; return False if ``index`` is out of range."""

    @abstractmethod
    def push_task(self, task: TaskModel) -> bool:
        """Append a task; return whether it was stored."""


class MockDateTimeRepository(DateTimeRepository):
    """Returns fixed values given at construction."""

    def __init__(self, current_date: DateModel, current_time: TimeModel, time_stamp: int) -> None:
        self._current_date = current_date
        self._current_time = current_time
        self._time_stamp = time_stamp

    def current_date(self) -> DateModel:
        return self._current_date

    def current_time(self) -> TimeModel:
        return self._current_time

    def date_to_string(self, date: DateModel) -> str:
        return f"{date.year}/{date.month}/{date.day}"

    def time_to_string(self, time: TimeModel) -> str:
        return f"{time.hour}:{time.minute}"

    def time_stamp(self, date: DateModel, time: TimeModel) -> int:
        return self._time_stamp


class MockTaskRepository(TaskRepository):
    """Keeps tasks in a list in memory."""

    def __init__(self, tasks: Iterable[TaskModel] = ()) -> None:
        self._tasks = list(tasks)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Optional[TaskModel]:
        return self._tasks[index] if self._in_range(index) else None

    def toggle_done(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        task = self._tasks[index]
        self._tasks[index] = dataclasses.replace(task, done=not task.done)
        return True

    def remove_task(self, index: int) -> bool:
        if not self._in_range(index):
            return False
        del self._tasks[index]
        return True

    def push_task(self, task: TaskModel) -> bool:
        self._tasks.append(task)
        return True


def date_time_repo() -> MockDateTimeRepository:
    """Return the application's default date/time repository."""
    return MockDateTimeRepository(
        DateModel(year=2024, month=6, day=11),
        TimeModel(hour=16, minute=43, second=0),
        1718183634,
    )


def task_repo() -> MockTaskRepository:
    """Return the application's default task repository."""
    return MockTaskRepository(
        [
            TaskModel(title="Learn Rust", done=True, due_date=1717686537151),
            TaskModel(title="Learn Slint", done=True, due_date=1717686537151),
            TaskModel(
                title="Create project with Rust and Slint",
                done=True,
                due_date=1717686537151,
            ),
        ]
    )