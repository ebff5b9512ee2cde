from __future__ import annotations

import logging
from datetime import date, datetime

from ..common.datetime_utils import parse_clock_12h
from .model import NormalizedPunch, PunchEvent

logger = logging.getLogger(__name__)


def _plain_date(value: date) -> date:
    # datetime is a date subclass but does not compare with plain dates
    return value.date() if isinstance(value, datetime) else value


def normalize_punch(punch: PunchEvent) -> NormalizedPunch:
    """Turn the punch's clock text into fractional minutes since midnight.

    Unparsable text is read as minute 0 and carries an issue; it never raises,
    so one bad record cannot block payroll for the whole period.
    """
    minutes = parse_clock_12h(punch.time_text)
    issue = None
    if minutes is None:
        issue = f"Unparsable time '{punch.time_text}' treated as 12:00 AM"
        logger.warning("punch on %s: %s", punch.calendar_date.isoformat(), issue)
        minutes = 0.0

    return NormalizedPunch(
        calendar_date=_plain_date(punch.calendar_date),
        minutes=minutes,
        is_presence_in=punch.is_presence_in,
        time_text=punch.time_text,
        issue=issue,
    )


def normalize_punches(punches) -> list[NormalizedPunch]:
    return [normalize_punch(p) for p in punches]
