"""Normalize attendance-store records into engine punches.

Store records look like ``{date, time, presence, worker, rfid}``. Presence has
been stored as booleans, ``"IN"/"OUT"`` strings and 0/1 over time; it is mapped
once here to ``PunchEvent.is_presence_in``.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from .model import PunchEvent

_IN_VALUES = {"in", "true", "1", "yes", "present", "check_in", "checkin"}
_OUT_VALUES = {"out", "false", "0", "no", "check_out", "checkout"}


def parse_presence(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1 if value in (0, 1) else None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _IN_VALUES:
            return True
        if text in _OUT_VALUES:
            return False
    return None


def _calendar_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value)
        except ValueError:
            pass
    raise ValidationError(f"Punch date {value!r} is not a valid date")


def _worker_id(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        value = value.get("_id") or value.get("id")
    return str(value) if value not in (None, "") else None


def punch_from_record(record: Mapping[str, Any]) -> PunchEvent:
    if not isinstance(record, Mapping):
        raise ValidationError(f"Punch record must be an object, got {type(record).__name__}")
    return PunchEvent(
        time_text=str(record.get("time") or ""),
        is_presence_in=parse_presence(record.get("presence")),
        calendar_date=_calendar_date(record.get("date")),
        worker_id=_worker_id(record.get("worker")) or _worker_id(record.get("rfid")),
    )


def punches_from_records(records: Iterable[Mapping[str, Any]]) -> list[PunchEvent]:
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise ValidationError("Punches must be a list of records")
    return [punch_from_record(r) for r in records]
