from datetime import date, datetime, timedelta, timezone

from todoweather.day_names import get_day_from_datetime

WEEKDAYS = {"Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"}


def test_same_day_is_today():
    moment = datetime(2024, 6, 11, 8, 0, tzinfo=timezone.utc)
    assert get_day_from_datetime(moment, today=date(2024, 6, 11)) == "Today"


def test_only_day_of_month_is_compared():
    moment = datetime(2024, 7, 11, 8, 0, tzinfo=timezone.utc)
    assert get_day_from_datetime(moment, today=date(2024, 6, 11)) == "Today"


def test_other_day_gives_weekday_name():
    moment = datetime(2024, 6, 10, 8, 0, tzinfo=timezone.utc)
    assert get_day_from_datetime(moment, today=date(2024, 6, 11)) == "Mon"


def test_week_gives_distinct_weekday_names():
    start = datetime(2024, 6, 12, 12, 0, tzinfo=timezone.utc)
    names = [get_day_from_datetime(start + timedelta(days=i), today=date(2024, 6, 11)) for i in range(7)]
    assert set(names) == WEEKDAYS


def test_default_today_for_now():
    assert get_day_from_datetime(datetime.now().astimezone()) == "Today"


def test_same_weekday_week_apart():
    today = date(2024, 6, 1)
    a = get_day_from_datetime(datetime(2024, 6, 3, tzinfo=timezone.utc), today=today)
    b = get_day_from_datetime(datetime(2024, 6, 10, tzinfo=timezone.utc), today=today)
    assert a == b
    assert a in WEEKDAYS