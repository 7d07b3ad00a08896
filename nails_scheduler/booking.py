import logging
import uuid
from typing import List, Sequence

from nails_scheduler import config, telegram_notifier
from nails_scheduler.availability import available_start_times
from nails_scheduler.dates import DateLike, iso_date, to_minutes, week_days
from nails_scheduler.models import Appointment, DaySummary
from nails_scheduler.occupancy import build_occupancy, coverage_percent, is_fully_booked, remaining_places
from nails_scheduler.persist import AppointmentStore
from nails_scheduler.rules import rules_for

logger = logging.getLogger(__name__)


class BookingError(ValueError):
    """Raised when an appointment cannot be added to a day."""


def new_appointment_id() -> str:
    return uuid.uuid4().hex


def appointments_for_day(appointments: Sequence[Appointment], day: DateLike) -> List[Appointment]:
    """Returns the appointments stored for a day, ordered by start time."""
    day_iso = iso_date(day)
    return sorted((a for a in appointments if a.date == day_iso), key=lambda a: to_minutes(a.time))


def summarize_day(day: DateLike, appointments: Sequence[Appointment]) -> DaySummary:
    """Computes everything the day view shows. `appointments` may span several days."""
    day_appointments = appointments_for_day(appointments, day)
    rules = rules_for(day)
    fully_booked = is_fully_booked(day, day_appointments)
    remaining = remaining_places(day, day_appointments)

    return DaySummary(
        date=iso_date(day),
        rules=rules,
        occupancy=build_occupancy(day, day_appointments),
        coverage_percent=coverage_percent(day, day_appointments),
        fully_booked=fully_booked,
        remaining=remaining,
        can_add=not rules.closed and not fully_booked and remaining > 0,
        appointments=day_appointments,
    )


def summarize_week(day: DateLike, appointments: Sequence[Appointment]) -> List[DaySummary]:
    """Summarizes Monday to Sunday of the week containing the given day."""
    return [summarize_day(d, appointments) for d in week_days(day)]


def add_appointment(
    store: AppointmentStore,
    day: DateLike,
    client_name: str,
    time: str | None = None,
    duration: int = config.DEFAULT_DURATION,
    notes: str = "",
    appointment_id: str | None = None,
) -> Appointment:
    """Books a new appointment after checking it against the latest stored state.

    When no start time is given the earliest available one is used.
    """
    appointments = store.load()
    day_appointments = appointments_for_day(appointments, day)
    rules = rules_for(day)

    if rules.closed:
        raise BookingError(f"{iso_date(day)} is a closed day.")
    if is_fully_booked(day, day_appointments):
        raise BookingError(f"{iso_date(day)} is fully booked.")

    options = available_start_times(day, day_appointments, duration)
    if time is None:
        if not options:
            raise BookingError(f"No free {duration} min interval left on {iso_date(day)}.")
        time = options[0]
    elif time not in options:
        raise BookingError(f"{time} is not available for a {duration} min appointment on {iso_date(day)}.")

    appointment = Appointment(
        id=appointment_id or new_appointment_id(),
        date=iso_date(day),
        time=time,
        duration=duration,
        client_name=client_name,
        notes=notes,
    )

    store.save([*appointments, appointment])
    logger.info(f"Booked {appointment.client_name} on {appointment.date} at {appointment.time} ({duration} min)")
    telegram_notifier.send_telegram_message(telegram_notifier.format_booking_message(appointment))
    return appointment


def remove_appointment(store: AppointmentStore, appointment_id: str) -> bool:
    """Deletes an appointment by id. Returns False when no appointment has that id."""
    appointments = store.load()
    kept = [a for a in appointments if a.id != appointment_id]
    if len(kept) == len(appointments):
        logger.warning(f"No appointment with id {appointment_id}")
        return False

    store.save(kept)
    removed = next(a for a in appointments if a.id == appointment_id)
    logger.info(f"Removed appointment {appointment_id} ({removed.date} {removed.time})")
    telegram_notifier.send_telegram_message(telegram_notifier.format_cancellation_message(removed), silent=True)
    return True
