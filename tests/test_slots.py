from unittest.mock import patch

from nails_scheduler import dates, slots


def test_monday_slots():
    result = slots.half_hour_slots("2025-01-06")
    assert len(result) == 16
    assert result[0] == "08:00"
    assert result[-1] == "15:30"
    assert "16:00" not in result


def test_saturday_slots():
    result = slots.half_hour_slots("2025-01-11")
    assert len(result) == 12
    assert result[0] == "09:00"
    assert result[-1] == "14:30"


def test_sunday_has_no_slots():
    assert slots.half_hour_slots("2025-01-12") == []


def test_slots_step_thirty_minutes():
    minutes = [dates.to_minutes(s) for s in slots.half_hour_slots("2025-01-08")]
    assert all(b - a == 30 for a, b in zip(minutes, minutes[1:]))


@patch.dict("nails_scheduler.config.BUSINESS_HOURS", {1: (12, 11, 5)})
def test_inverted_window_has_no_slots():
    assert slots.half_hour_slots("2025-01-06") == []
