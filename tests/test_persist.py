import json
from unittest.mock import MagicMock, mock_open, patch

import pytest

from nails_scheduler import config, persist
from nails_scheduler.models import Appointment

RECORD = {
    "id": "abc123",
    "date": "2025-01-06",
    "time": "10:00",
    "duration": 60,
    "clientName": "Andreea Popescu",
    "notes": "gel, french",
}


def test_default_path_comes_from_config():
    assert persist.AppointmentStore().path == config.STORAGE_FILE


def test_ensure_data_dir():
    store = persist.AppointmentStore("/tmp/scheduler/appointments.json")
    with patch("os.path.exists") as mock_exists, patch("os.makedirs") as mock_makedirs:
        # Case 1: Exists
        mock_exists.return_value = True
        store.ensure_data_dir()
        mock_makedirs.assert_not_called()

        # Case 2: Does not exist
        mock_exists.return_value = False
        store.ensure_data_dir()
        mock_makedirs.assert_called_with("/tmp/scheduler")


@patch("os.path.exists")
def test_load(mock_exists):
    mock_exists.return_value = True
    test_data = json.dumps({"last_updated": "2025-01-01T12:00:00Z", config.STORAGE_KEY: [RECORD]})
    with patch("builtins.open", mock_open(read_data=test_data)):
        appointments = persist.AppointmentStore("/tmp/test_appointments.json").load()

    assert len(appointments) == 1
    assert appointments[0].client_name == "Andreea Popescu"
    assert appointments[0].duration == 60


@patch("os.path.exists")
def test_load_bare_list(mock_exists):
    """Test loading the plain array format without metadata."""
    mock_exists.return_value = True
    with patch("builtins.open", mock_open(read_data=json.dumps([RECORD]))):
        appointments = persist.AppointmentStore("/tmp/test_appointments.json").load()
    assert [a.id for a in appointments] == ["abc123"]


def test_load_no_file():
    with patch("os.path.exists") as mock_exists:
        mock_exists.return_value = False
        assert persist.AppointmentStore("/tmp/missing.json").load() == []


@patch("os.path.exists")
def test_load_corrupt_file(mock_exists):
    mock_exists.return_value = True
    with patch("builtins.open", mock_open(read_data="{not json")):
        assert persist.AppointmentStore("/tmp/test_appointments.json").load() == []


@patch("os.path.exists")
def test_load_unexpected_shape(mock_exists):
    mock_exists.return_value = True
    with patch("builtins.open", mock_open(read_data='{"something": "else"}')):
        assert persist.AppointmentStore("/tmp/test_appointments.json").load() == []


@patch("os.path.exists")
def test_load_skips_invalid_records(mock_exists):
    mock_exists.return_value = True
    records = [
        RECORD,
        {**RECORD, "id": "no-name", "clientName": "   "},
        {**RECORD, "id": "bad-time", "time": "ten"},
        {"id": "incomplete"},
    ]
    with patch("builtins.open", mock_open(read_data=json.dumps({config.STORAGE_KEY: records}))):
        appointments = persist.AppointmentStore("/tmp/test_appointments.json").load()
    assert [a.id for a in appointments] == ["abc123"]


@patch("nails_scheduler.persist.datetime")
@patch("nails_scheduler.persist.json.dump")
def test_save(mock_dump, mock_datetime):
    """Test that save wraps the appointments with a timestamp under the storage key."""
    mock_now = MagicMock()
    mock_now.isoformat.return_value = "2025-01-01T12:00:00Z"
    mock_datetime.now.return_value = mock_now

    store = persist.AppointmentStore("/tmp/test_appointments.json")
    with patch.object(store, "ensure_data_dir"), patch("builtins.open", mock_open()):
        store.save([Appointment.model_validate(RECORD)])

    args, _ = mock_dump.call_args
    saved_data = args[0]
    assert saved_data["last_updated"] == "2025-01-01T12:00:00Z"
    assert saved_data[config.STORAGE_KEY] == [RECORD]


def test_save_io_error_is_logged_and_raised(caplog):
    store = persist.AppointmentStore("/tmp/test_appointments.json")
    with patch.object(store, "ensure_data_dir"), patch("builtins.open", side_effect=IOError("disk full")):
        with pytest.raises(IOError):
            store.save([])

    assert any(r.levelname == "ERROR" and "disk full" in r.getMessage() for r in caplog.records)


def test_load_file_that_is_not_utf8(tmp_path):
    path = tmp_path / "appointments.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert persist.AppointmentStore(str(path)).load() == []


def test_round_trip_keeps_non_ascii_names(tmp_path):
    path = tmp_path / "appointments.json"
    store = persist.AppointmentStore(str(path))
    appointment = Appointment.model_validate({**RECORD, "clientName": "Ștefania Țurcanu"})

    store.save([appointment])

    assert "Ștefania Țurcanu" in path.read_text(encoding="utf-8")
    assert store.load() == [appointment]


def test_round_trip(tmp_path):
    store = persist.AppointmentStore(str(tmp_path / "nested" / "appointments.json"))
    appointment = Appointment.model_validate(RECORD)

    store.save([appointment])

    assert store.load() == [appointment]
    raw = json.loads((tmp_path / "nested" / "appointments.json").read_text())
    assert raw[config.STORAGE_KEY][0]["clientName"] == "Andreea Popescu"
