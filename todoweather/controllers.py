"""Controllers for creating tasks and managing the task list."""

from __future__ import annotations

import dataclasses
from typing import Callable, Iterator, List, Optional

from .callback import Callback
from .models import DateModel, TaskModel, TimeModel
from .repositories import DateTimeRepository, TaskRepository

# A listener receives the kind of change ("changed", "removed" or "added"),
# the first affected row and the number of rows affected.
Listener = Callable[[str, int, int], None]


class CreateTaskController:
    """Supplies date and time data to the task creation view."""

    def __init__(self, repo: DateTimeRepository) -> None:
        self._repo = repo
        self._back_callback: Callback = Callback()

    def current_date(self) -> DateModel:
        return self._repo.current_date()

    def current_time(self) -> TimeModel:
        return self._repo.current_time()

    def date_string(self, date_model: DateModel) -> str:
        return self._repo.date_to_string(date_model)

    def time_string(self, time_model: TimeModel) -> str:
        return self._repo.time_to_string(time_model)

    def back(self) -> None:
        """Trigger the registered back handler, if any."""
        self._back_callback.invoke(())

    def on_back(self, callback: Callable[[], None]) -> None:
        """Register the handler run by :meth:`back`."""
        self._back_callback.on(lambda _args: callback())

    def time_stamp(self, date_model: DateModel, time_model: TimeModel) -> int:
        return self._repo.time_stamp(date_model, time_model)


class TaskListModel:
    """A row-based view of a task repository that notifies listeners of changes."""

    def __init__(self, repo: TaskRepository) -> None:
        self._repo = repo
        self._listeners: List[Listener] = []

    def row_count(self) -> int:
        return self._repo.task_count()

    def row_data(self, row: int) -> Optional[TaskModel]:
        return self._repo.get_task(row)

    def add_listener(self, listener: Listener) -> None:
        """Register ``listener`` to be told about row changes."""
        self._listeners.append(listener)

    def _notify(self, kind: str, row: int, count: int) -> None:
        for listener in list(self._listeners):
            listener(kind, row, count)

    def toggle_done(self, index: int) -> None:
        if self._repo.toggle_done(index):
            self._notify("changed", index, 1)

    def remove_task(self, index: int) -> None:
        if self._repo.remove_task(index):
            self._notify("removed", index, 1)

    def push_task(self, task: TaskModel) -> None:
        if self._repo.push_task(task):
            self._notify("added", self.row_count() - 1, 1)

    def __len__(self) -> int:
        return self.row_count()

    def __iter__(self) -> Iterator[TaskModel]:
        for row in range(self.row_count()):
            task = self.row_data(row)
            if task is not None:
                yield task


class TaskListController:
    """Manages the list of tasks and requests to open the creation view."""

    def __init__(self, repo: TaskRepository) -> None:
        self._task_model = TaskListModel(repo)
        self._show_create_task_callback: Callback = Callback()

    def task_model(self) -> TaskListModel:
        return self._task_model

    def toggle_done(self, index: int) -> None:
        self._task_model.toggle_done(index)

    def remove_task(self, index: int) -> None:
        self._task_model.remove_task(index)

    def create_task(self, title: str, due_date: int) -> None:
        self._task_model.push_task(TaskModel(title=title, due_date=due_date))

    def show_create_task(self) -> None:
        self._show_create_task_callback.invoke(())

    def on_show_create_task(self, callback: Callable[[], None]) -> None:
        self._show_create_task_callback.on(lambda _args: callback())


__all__ = [
    "CreateTaskController",
    "TaskListController",
    "TaskListModel",
    "dataclasses",
]