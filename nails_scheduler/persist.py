import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, List

from pydantic import ValidationError

from nails_scheduler import config
from nails_scheduler.models import Appointment

logger = logging.getLogger(__name__)


class AppointmentStore:
    """Keeps the whole appointment collection in a single JSON file."""

    def __init__(self, path: str | None = None):
        self.path = path or config.STORAGE_FILE

    def ensure_data_dir(self):
        """Ensures the directory holding the storage file exists."""
        directory = os.path.dirname(self.path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

    def load(self) -> List[Appointment]:
        """Loads the stored appointments, discarding anything that cannot be parsed."""
        if not os.path.exists(self.path):
            logger.info("No appointments file found. Starting fresh.")
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data: Any = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, IOError):
            logger.warning("Failed to load appointments file. Starting fresh.")
            return []

        if isinstance(data, dict) and config.STORAGE_KEY in data:
            logger.info(f"Loaded appointments, last updated: {data.get('last_updated')}")
            records = data[config.STORAGE_KEY]
        else:
            records = data

        if not isinstance(records, list):
            logger.warning("Appointments file has unexpected format. Starting fresh.")
            return []

        appointments = []
        for record in records:
            try:
                appointments.append(Appointment.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored appointment {record!r}: {e}")
        return appointments

    def save(self, appointments: List[Appointment]):
        """Writes the full appointment collection with a timestamp. Raises IOError when the file cannot be written."""
        self.ensure_data_dir()
        try:
            data = {
                "last_updated": datetime.now(timezone.utc).isoformat(),
                config.STORAGE_KEY: [a.model_dump(by_alias=True) for a in appointments],
            }
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            logger.info(f"Saved {len(appointments)} appointments to {self.path}")
        except IOError as e:
            logger.error(f"Failed to save appointments: {e}")
            raise
