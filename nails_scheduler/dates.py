"""Calendar helpers shared by the scheduling engine.

Every function accepts a ``date``, a ``datetime`` (time-of-day is ignored) or
an ISO ``YYYY-MM-DD`` string.
"""

from datetime import date, datetime, timedelta
from typing import List, Union

DateLike = Union[date, datetime, str]


def start_of_day(value: DateLike) -> date:
    """Normalizes the input to a plain calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def iso_date(value: DateLike) -> str:
    return start_of_day(value).strftime("%Y-%m-%d")


def same_day(a: DateLike, b: DateLike) -> bool:
    return iso_date(a) == iso_date(b)


def weekday_index(value: DateLike) -> int:
    """Returns 0=Sunday, 1=Monday ... 6=Saturday."""
    return start_of_day(value).isoweekday() % 7


def add_days(value: DateLike, n: int) -> date:
    return start_of_day(value) + timedelta(days=n)


def monday_of_week(value: DateLike) -> date:
    """Returns the Monday of the week containing the given day (Sunday belongs to the week before)."""
    day = start_of_day(value)
    return day - timedelta(days=day.weekday())


def week_days(value: DateLike) -> List[date]:
    """Returns the seven days, Monday to Sunday, of the week containing the given day."""
    monday = monday_of_week(value)
    return [monday + timedelta(days=i) for i in range(7)]


def to_minutes(time_str: str) -> int:
    """Converts an HH:MM label to minutes from midnight."""
    hours, minutes = time_str.split(":")
    return int(hours) * 60 + int(minutes)


def format_minutes(minutes: int) -> str:
    """Converts minutes from midnight to an HH:MM label."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
