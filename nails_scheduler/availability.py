import logging
from typing import List, Sequence

from nails_scheduler import config
from nails_scheduler.dates import DateLike, to_minutes
from nails_scheduler.models import Appointment
from nails_scheduler.occupancy import build_occupancy, clamp_duration
from nails_scheduler.rules import working_window
from nails_scheduler.slots import half_hour_slots

logger = logging.getLogger(__name__)


def can_fit(day: DateLike, start_time: str, duration: int, occupancy: Sequence[bool]) -> bool:
    """Checks whether an appointment starting at start_time fits before closing without touching an occupied cell.

    Args:
        day: the day being booked
        start_time: candidate start in HH:MM format
        duration: requested minutes, clamped to the bookable range
        occupancy: bitmap built from the existing appointments of that day

    Returns:
        True if every cell covered by the appointment is inside the window and free
    """
    window = working_window(day)
    start = to_minutes(start_time)
    end = start + clamp_duration(duration)

    if end > window.end_min:
        return False

    for minute in range(start, end, config.SLOT_MINUTES):
        index = (minute - window.start_min) // config.SLOT_MINUTES
        if index < 0 or index >= len(occupancy) or occupancy[index]:
            return False

    return True


def available_start_times(day: DateLike, existing: Sequence[Appointment], duration: int) -> List[str]:
    """Lists every start time at which a new appointment of the given duration can be booked."""
    occupancy = build_occupancy(day, existing)
    options = [slot for slot in half_hour_slots(day) if can_fit(day, slot, duration, occupancy)]
    logger.debug(f"{len(options)} start times available for {clamp_duration(duration)} min: {options}")
    return options
