import argparse
import logging
import sys
from datetime import date, datetime

from nails_scheduler import booking, config, report
from nails_scheduler.availability import available_start_times
from nails_scheduler.persist import AppointmentStore

# --- Logging Setup ---

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool):
    """Configures logging to stderr with local time."""
    import time

    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s]: %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    # Use local time instead of UTC for logging
    formatter.converter = time.localtime
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=level,
        handlers=[handler],
    )


def parse_arguments(argv=None):
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(description="Weekly appointment book for a small salon.")
    parser.add_argument("--store", type=str, help=f"Appointments file. Defaults to {config.STORAGE_FILE}.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    week = subparsers.add_parser("week", help="Show the week overview and the selected day.")
    week.add_argument("--date", type=str, help="Day in YYYY-MM-DD format. Defaults to today.")

    day = subparsers.add_parser("day", help="Show a single day.")
    day.add_argument("--date", type=str, help="Day in YYYY-MM-DD format. Defaults to today.")

    slots = subparsers.add_parser("slots", help="List free start times for a new appointment.")
    slots.add_argument("--date", type=str, help="Day in YYYY-MM-DD format. Defaults to today.")
    slots.add_argument("--duration", type=int, default=config.DEFAULT_DURATION, choices=config.DURATION_CHOICES)

    add = subparsers.add_parser("add", help="Add an appointment.")
    add.add_argument("--date", type=str, help="Day in YYYY-MM-DD format. Defaults to today.")
    add.add_argument("--time", type=str, help="Start time in HH:MM format. Defaults to the first free one.")
    add.add_argument("--duration", type=int, default=config.DEFAULT_DURATION, choices=config.DURATION_CHOICES)
    add.add_argument("--name", type=str, required=True, help="Client name.")
    add.add_argument("--notes", type=str, default="", help="Optional notes.")

    delete = subparsers.add_parser("delete", help="Delete an appointment by id.")
    delete.add_argument("id", type=str)

    return parser.parse_args(argv)


def parse_day(date_arg: str | None) -> date:
    if not date_arg:
        return datetime.now().date()
    try:
        return datetime.strptime(date_arg, "%Y-%m-%d").date()
    except ValueError:
        logger.error("Error: Date must be in YYYY-MM-DD format.")
        sys.exit(1)


def show_week(store: AppointmentStore, day: date):
    appointments = store.load()
    report.print_week_report(booking.summarize_week(day, appointments), selected=day.isoformat())
    report.print_day_report(booking.summarize_day(day, appointments))


def show_day(store: AppointmentStore, day: date):
    report.print_day_report(booking.summarize_day(day, store.load()))


def show_slots(store: AppointmentStore, day: date, duration: int):
    existing = booking.appointments_for_day(store.load(), day)
    options = available_start_times(day, existing, duration)
    if options:
        print(f"Free start times for {duration} min on {day.isoformat()}: {', '.join(options)}")
    else:
        print(f"No free intervals left on {day.isoformat()}.")


def main(argv=None):
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    store = AppointmentStore(args.store)

    if args.command == "delete":
        try:
            removed = booking.remove_appointment(store, args.id)
        except IOError as e:
            logger.error(f"Could not delete appointment: {e}")
            sys.exit(1)
        if not removed:
            sys.exit(1)
        return

    day = parse_day(args.date)
    if args.command == "week":
        show_week(store, day)
    elif args.command == "day":
        show_day(store, day)
    elif args.command == "slots":
        show_slots(store, day, args.duration)
    elif args.command == "add":
        try:
            appointment = booking.add_appointment(
                store, day, client_name=args.name, time=args.time, duration=args.duration, notes=args.notes
            )
        except (ValueError, IOError) as e:
            logger.error(f"Could not add appointment: {e}")
            sys.exit(1)
        print(f"Added {appointment.client_name} on {appointment.date} at {appointment.time} [{appointment.id}]")
