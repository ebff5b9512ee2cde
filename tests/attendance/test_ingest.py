from datetime import date, datetime

import pytest

from src.workforce_payroll.workforce_payroll.attendance.ingest import parse_presence, punch_from_record, punches_from_records
from src.workforce_payroll.workforce_payroll.core.exceptions import ValidationError
from src.workforce_payroll.workforce_payroll.users.ingest import worker_from_record


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), ("IN", True), ("out", False), (1, True), (0, False), (None, None), ("?", None), (7, None)],
)
def test_parse_presence(value, expected):
    assert parse_presence(value) is expected


def test_store_record_with_iso_timestamp_date():
    record = {
        "date": "2025-06-02T00:00:00.000Z",
        "time": "9:01:15 AM",
        "presence": "IN",
        "worker": {"_id": "abc123", "name": "Ravi"},
        "rfid": "RF-001",
    }

    p = punch_from_record(record)

    assert p.calendar_date == date(2025, 6, 2)
    assert p.time_text == "9:01:15 AM"
    assert p.is_presence_in is True
    assert p.worker_id == "abc123"


def test_record_with_datetime_date_and_rfid_only():
    p = punch_from_record({"date": datetime(2025, 6, 2, 9, 0), "time": "9:00 AM", "presence": False, "rfid": "RF-9"})

    assert p.calendar_date == date(2025, 6, 2)
    assert p.worker_id == "RF-9"


def test_record_without_date_is_rejected():
    with pytest.raises(ValidationError):
        punch_from_record({"time": "9:00 AM", "presence": True})


@pytest.mark.parametrize("record", ["9:00 AM", 42, None, ["2025-06-02", "9:00 AM"]])
def test_non_object_record_is_rejected(record):
    with pytest.raises(ValidationError):
        punch_from_record(record)


@pytest.mark.parametrize("records", ["9:00 AM", 42, {"time": "9:00 AM"}])
def test_punches_must_be_a_list(records):
    with pytest.raises(ValidationError):
        punches_from_records(records)


def test_worker_record_keeps_missing_salary():
    w = worker_from_record({"name": "Asha", "department": {"name": "Packing"}})

    assert w.salary is None
    assert w.department == "Packing"
