import logging
import os
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

# --- File Paths ---
DATA_DIR = os.environ.get("SCHEDULER_DATA_DIR", "data")
STORAGE_FILE = os.environ.get("SCHEDULER_STORAGE_FILE", os.path.join(DATA_DIR, "appointments.json"))

# Key the appointment list is stored under
STORAGE_KEY = "nails_scheduler_v2"

# --- Slot grid & durations ---
SLOT_MINUTES = 30
MIN_DURATION = 30
MAX_DURATION = 90
DEFAULT_DURATION = 90
DURATION_CHOICES = (30, 60, 90)

# --- Business hours ---
# Weekday index (0=Sunday ... 6=Saturday) -> (open hour, close hour, max appointments).
# Weekdays not listed are closed.
BUSINESS_HOURS: Dict[int, Tuple[int, int, int]] = {
    1: (8, 16, 5),
    2: (8, 16, 5),
    3: (8, 16, 5),
    4: (8, 16, 5),
    5: (8, 16, 5),
    6: (9, 15, 3),
}

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# --- Telegram ---
TELEGRAM_BOT_TOKEN = os.environ.get("TELEGRAM_BOT_TOKEN")
TELEGRAM_CHAT_ID = os.environ.get("TELEGRAM_CHAT_ID")
if not TELEGRAM_BOT_TOKEN or not TELEGRAM_CHAT_ID:
    logger.debug("Telegram configuration incomplete. Booking notifications disabled.")
