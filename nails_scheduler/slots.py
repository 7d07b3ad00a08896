import logging
from typing import List

from nails_scheduler import config
from nails_scheduler.dates import DateLike, format_minutes
from nails_scheduler.rules import rules_for

logger = logging.getLogger(__name__)


def half_hour_slots(day: DateLike) -> List[str]:
    """Generates every HH:MM start label between opening (inclusive) and closing (exclusive)."""
    rules = rules_for(day)
    if rules.closed or rules.open_hour >= rules.close_hour:
        return []

    slots = []
    current_minute = rules.open_hour * 60
    end_minute = rules.close_hour * 60

    while current_minute < end_minute:
        slots.append(format_minutes(current_minute))
        current_minute += config.SLOT_MINUTES

    logger.debug(f"Generated {len(slots)} slots: {slots}")
    return slots
