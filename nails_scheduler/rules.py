import logging
from typing import NamedTuple

from nails_scheduler import config
from nails_scheduler.dates import DateLike, weekday_index
from nails_scheduler.models import DayRules

logger = logging.getLogger(__name__)


class WorkingWindow(NamedTuple):
    start_min: int
    end_min: int
    cells: int


def rules_for(day: DateLike) -> DayRules:
    """Resolves opening hours and the appointment cap for a day from its weekday."""
    hours = config.BUSINESS_HOURS.get(weekday_index(day))
    if hours is None:
        return DayRules(open_hour=0, close_hour=0, max_appointments=0, closed=True)

    open_hour, close_hour, max_appointments = hours
    return DayRules(open_hour=open_hour, close_hour=close_hour, max_appointments=max_appointments, closed=False)


def working_window(day: DateLike) -> WorkingWindow:
    """Returns the day's window in minutes from midnight and its number of half-hour cells."""
    rules = rules_for(day)
    start_min = rules.open_hour * 60
    end_min = rules.close_hour * 60
    cells = max(0, (end_min - start_min) // config.SLOT_MINUTES)
    return WorkingWindow(start_min=start_min, end_min=end_min, cells=cells)
