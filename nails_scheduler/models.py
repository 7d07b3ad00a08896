from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nails_scheduler import config


class Appointment(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    date: str  # ISO format YYYY-MM-DD
    time: str  # HH:MM format, local time
    duration: int | None = config.DEFAULT_DURATION  # minutes, clamped where consumed
    client_name: str = Field(alias="clientName")
    notes: str = ""

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        return datetime.strptime(value, "%Y-%m-%d").date().isoformat()

    @field_validator("time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        datetime.strptime(value, "%H:%M")
        return value

    @field_validator("client_name")
    @classmethod
    def validate_client_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("Client name is required.")
        return normalized

    @field_validator("notes", mode="before")
    @classmethod
    def normalize_notes(cls, value: str | None) -> str:
        if value is None:
            return ""
        return str(value).strip()


class DayRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    open_hour: int
    close_hour: int
    max_appointments: int
    closed: bool


class DaySummary(BaseModel):
    date: str
    rules: DayRules
    occupancy: List[bool]
    coverage_percent: float
    fully_booked: bool
    remaining: int
    can_add: bool
    appointments: List[Appointment]
