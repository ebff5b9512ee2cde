from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import TimeLike


@dataclass(frozen=True)
class Batch:
    """Thực thể miền (domain): Ca làm việc (batch/shift)."""

    name: str
    start_time: TimeLike
    end_time: TimeLike


@dataclass(frozen=True)
class BreakInterval:
    """A configured break inside the working day."""

    from_time: TimeLike
    to_time: TimeLike
    is_paid: bool = False
