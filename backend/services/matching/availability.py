"""Availability overlap: how much of a project's period a candidate covers."""

from collections.abc import Sequence

from models.schemas.availability import AvailabilityWindow, TimeWindow


def overlap_days(window: AvailabilityWindow, period: TimeWindow) -> int:
    """Whole days shared by an availability window and a project period."""
    overlap_start = max(period.start, window.available_from)
    overlap_end = min(period.end, window.available_to)
    return max(0, (overlap_end - overlap_start).days)


def availability_score(
    windows: Sequence[AvailabilityWindow],
    period: TimeWindow,
) -> float:
    """Fraction (0.0-1.0) of `period` covered by `windows`.

    A candidate without any availability entries counts as fully available,
    and so does every candidate when the project period has no positive
    length. Overlaps are summed as-is; windows of one candidate are expected
    not to overlap each other, the result is capped at 1.0 either way.
    """
    if not windows:
        return 1.0

    project_days = period.days
    if project_days <= 0:
        return 1.0

    covered_days = sum(overlap_days(w, period) for w in windows)
    return min(covered_days / project_days, 1.0)
