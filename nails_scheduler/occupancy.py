import logging
from typing import List, Sequence

from nails_scheduler import config
from nails_scheduler.dates import DateLike, to_minutes
from nails_scheduler.models import Appointment
from nails_scheduler.rules import rules_for, working_window

logger = logging.getLogger(__name__)


def clamp_duration(duration: int) -> int:
    """Constrains a duration to the bookable range."""
    return min(config.MAX_DURATION, max(config.MIN_DURATION, int(duration)))


def build_occupancy(day: DateLike, appointments: Sequence[Appointment]) -> List[bool]:
    """Folds a day's appointments into one flag per half-hour cell of the working window.

    Appointments starting before opening are moved to the opening time and
    anything past closing is cut off. A stored appointment without a
    duration counts as the default length. Overlapping appointments simply
    mark the same cells.
    """
    window = working_window(day)
    occupancy = [False] * window.cells

    for appointment in appointments:
        start = max(to_minutes(appointment.time), window.start_min)
        end = min(start + clamp_duration(appointment.duration or config.DEFAULT_DURATION), window.end_min)

        for minute in range(start, end, config.SLOT_MINUTES):
            index = (minute - window.start_min) // config.SLOT_MINUTES
            if 0 <= index < len(occupancy):
                occupancy[index] = True

    return occupancy


def coverage_percent(day: DateLike, appointments: Sequence[Appointment]) -> float:
    """Returns the share of occupied cells as a percentage, 0 for a closed day."""
    occupancy = build_occupancy(day, appointments)
    if not occupancy:
        return 0.0
    filled = sum(1 for cell in occupancy if cell)
    return filled / len(occupancy) * 100


def is_fully_booked(day: DateLike, appointments: Sequence[Appointment]) -> bool:
    """A day is full when no free cell is left or the appointment cap is reached."""
    rules = rules_for(day)
    if rules.closed:
        return False

    no_free_slots = all(build_occupancy(day, appointments))
    max_reached = len(appointments) >= rules.max_appointments
    return no_free_slots or max_reached


def remaining_places(day: DateLike, appointments: Sequence[Appointment]) -> int:
    return max(0, rules_for(day).max_appointments - len(appointments))
