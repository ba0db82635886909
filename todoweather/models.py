"""Plain data models for dates, times and tasks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DateModel:
    """A calendar date."""

    year: int = 0
    month: int = 0
    day: int = 0


@dataclass(frozen=True)
class TimeModel:
    """A time of day."""

    hour: int = 0
    minute: int = 0
    second: int = 0


@dataclass(frozen=True)
class TaskModel:
    """A to-do entry; ``due_date`` is in milliseconds since the epoch."""

    title: str = ""
    due_date: int = 0
    done: bool = False