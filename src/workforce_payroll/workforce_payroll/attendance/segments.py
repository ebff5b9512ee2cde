from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_clock
from ..schedules.model import ResolvedSchedule
from .model import NormalizedPunch, SegmentTotals


def pair_segments(punches: Sequence[NormalizedPunch]) -> tuple[list[tuple[float, float]], list[str]]:
    """Pair a day's time-sorted punches into IN -> OUT segments.

    An IN opens a segment when none is open and the next later OUT closes it.
    If any punch has no IN/OUT tag the whole day is paired by position instead
    (even index IN, odd index OUT).
    """
    issues: list[str] = []
    pairs: list[tuple[float, float]] = []

    if any(p.is_presence_in is None for p in punches):
        issues.append("Untagged punches paired by position")
        for i in range(0, len(punches) - 1, 2):
            pairs.append((punches[i].minutes, punches[i + 1].minutes))
        if len(punches) % 2:
            issues.append(f"Punch at {format_clock(punches[-1].minutes)} has no matching OUT")
        return pairs, issues

    open_in = None
    for p in punches:
        if p.is_presence_in:
            if open_in is None:
                open_in = p
            else:
                issues.append(f"Repeated IN at {format_clock(p.minutes)} ignored")
        elif open_in is not None:
            pairs.append((open_in.minutes, p.minutes))
            open_in = None
        else:
            issues.append(f"OUT at {format_clock(p.minutes)} without IN ignored")

    if open_in is not None:
        issues.append(f"IN at {format_clock(open_in.minutes)} has no matching OUT")
    return pairs, issues


def _net_minutes(start: float, end: float, schedule: ResolvedSchedule) -> float:
    if end <= start:
        return 0.0
    return max(end - start - schedule.unpaid_overlap(start, end), 0.0)


def calculate_segments(punches: Sequence[NormalizedPunch], schedule: ResolvedSchedule) -> SegmentTotals:
    """Worked minutes for one day.

    Segments are clipped to the work window and unpaid lunch/break overlaps are
    subtracted. Without overtime the day total is capped at the standard
    working minutes; with overtime the part outside the window is added and
    reported separately.
    """
    pairs, issues = pair_segments(punches)
    ws, we = schedule.work_start, schedule.work_end

    worked = 0.0
    overtime = 0.0
    counted = 0
    for start, end in pairs:
        inside = _net_minutes(max(start, ws), min(end, we), schedule)
        outside = 0.0
        if schedule.consider_overtime:
            outside = _net_minutes(start, min(end, ws), schedule) + _net_minutes(max(start, we), end, schedule)
        if inside > 0 or outside > 0:
            counted += 1
        worked += inside
        overtime += outside

    if not schedule.consider_overtime:
        worked = min(worked, schedule.standard_working_minutes)

    return SegmentTotals(
        worked_minutes=worked + overtime,
        overtime_minutes=overtime,
        segment_count=counted,
        issues=tuple(issues),
    )
