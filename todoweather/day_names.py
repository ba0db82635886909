"""Short day names for forecast entries."""

from __future__ import annotations

from datetime import date as _date
from datetime import datetime
from typing import Optional, Union

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def get_day_from_datetime(date: Union[datetime, _date], today: Optional[Union[datetime, _date]] = None) -> str:
    """Return "Today" if ``date`` falls on today's day of the month, else its short weekday name.

    ``today`` defaults to the current local date.
    """
    if today is None:
        today = datetime.now().astimezone()
    if date.day == today.day:
        return "Today"
    return _WEEKDAYS[date.weekday()]