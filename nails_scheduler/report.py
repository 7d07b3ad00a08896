"""Plain-text rendering of the day panel and the weekly overview."""

from typing import List

from nails_scheduler import config
from nails_scheduler.dates import weekday_index
from nails_scheduler.models import DaySummary

FREE_CELL = "·"
BOOKED_CELL = "█"
FULL_CELL = "▓"
BATTERY_SEGMENTS = 10


def fill_label(summary: DaySummary) -> str:
    return "FULL" if summary.fully_booked else f"{summary.coverage_percent:.0f}%"


def render_ring(summary: DaySummary) -> str:
    """One glyph per half-hour cell, every cell marked when the day is fully booked."""
    if summary.fully_booked:
        cells = FULL_CELL * len(summary.occupancy)
    else:
        cells = "".join(BOOKED_CELL if cell else FREE_CELL for cell in summary.occupancy)
    return f"[{cells}] {fill_label(summary)}"


def render_battery(summary: DaySummary) -> str:
    pct = max(0.0, min(100.0, summary.coverage_percent))
    filled = BATTERY_SEGMENTS if summary.fully_booked else round(pct / 100 * BATTERY_SEGMENTS)
    return "[" + "█" * filled + "-" * (BATTERY_SEGMENTS - filled) + "]"


def format_day_report(summary: DaySummary) -> str:
    rules = summary.rules
    day_name = config.WEEKDAY_NAMES[weekday_index(summary.date)]
    lines = [f"\n--- {day_name} {summary.date} ---"]

    if rules.closed:
        lines.append("Closed")
    else:
        lines.append(f"Hours: {rules.open_hour:02d}:00-{rules.close_hour:02d}:00 | Places left: {summary.remaining}")
        lines.append(render_ring(summary))

    if not summary.appointments:
        lines.append("No appointments for this day.")
    for a in summary.appointments:
        entry = f"{a.time} ({a.duration}m) {a.client_name}" if a.duration else f"{a.time} {a.client_name}"
        if a.notes:
            entry += f" - {a.notes}"
        lines.append(f"  {entry}  [{a.id}]")

    return "\n".join(lines)


def format_week_report(summaries: List[DaySummary], selected: str | None = None) -> str:
    lines = ["\n--- Week overview ---"]
    for summary in summaries:
        marker = ">" if summary.date == selected else " "
        day_name = config.WEEKDAY_NAMES[weekday_index(summary.date)]
        label = "closed" if summary.rules.closed else fill_label(summary)
        lines.append(f"{marker} {day_name} {summary.date} {render_battery(summary)} {label}")
    return "\n".join(lines)


def print_day_report(summary: DaySummary):
    """Prints the day panel to stdout."""
    print(format_day_report(summary))


def print_week_report(summaries: List[DaySummary], selected: str | None = None):
    """Prints the weekly overview to stdout."""
    print(format_week_report(summaries, selected))
