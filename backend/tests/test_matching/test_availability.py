"""Tests for the availability overlap calculator."""

from datetime import date

from models.schemas.availability import AvailabilityWindow, TimeWindow
from services.matching.availability import availability_score, overlap_days

PROJECT = TimeWindow(start=date(2026, 3, 1), end=date(2026, 9, 1))  # 184 days


def _window(start: date, end: date) -> AvailabilityWindow:
    return AvailabilityWindow(available_from=start, available_to=end)


class TestAvailabilityScore:
    def test_no_windows_counts_as_available(self):
        assert availability_score([], PROJECT) == 1.0

    def test_half_period_covered(self):
        windows = [_window(date(2026, 3, 1), date(2026, 6, 1))]
        assert availability_score(windows, PROJECT) == 0.5

    def test_full_period_covered(self):
        windows = [_window(date(2026, 3, 1), date(2026, 9, 1))]
        assert availability_score(windows, PROJECT) == 1.0

    def test_window_beyond_project_is_capped(self):
        windows = [_window(date(2025, 1, 1), date(2027, 1, 1))]
        assert availability_score(windows, PROJECT) == 1.0

    def test_disjoint_window_scores_zero(self):
        windows = [_window(date(2025, 1, 1), date(2025, 12, 31))]
        assert availability_score(windows, PROJECT) == 0.0

    def test_several_windows_are_summed(self):
        windows = [
            _window(date(2026, 3, 1), date(2026, 4, 1)),  # 31 days
            _window(date(2026, 5, 1), date(2026, 6, 1)),  # 31 days
        ]
        assert availability_score(windows, PROJECT) == 62 / 184

    def test_overlapping_windows_never_exceed_one(self):
        full = _window(date(2026, 3, 1), date(2026, 9, 1))
        assert availability_score([full, full], PROJECT) == 1.0

    def test_zero_length_project(self):
        period = TimeWindow(start=date(2026, 3, 1), end=date(2026, 3, 1))
        windows = [_window(date(2025, 1, 1), date(2025, 2, 1))]
        assert availability_score(windows, period) == 1.0

    def test_inverted_project_window(self):
        period = TimeWindow(start=date(2026, 9, 1), end=date(2026, 3, 1))
        windows = [_window(date(2025, 1, 1), date(2025, 2, 1))]
        assert availability_score(windows, period) == 1.0


class TestOverlapDays:
    def test_partial_overlap_at_start(self):
        window = _window(date(2026, 2, 1), date(2026, 3, 11))
        assert overlap_days(window, PROJECT) == 10

    def test_no_overlap_is_zero_not_negative(self):
        window = _window(date(2026, 10, 1), date(2026, 11, 1))
        assert overlap_days(window, PROJECT) == 0
