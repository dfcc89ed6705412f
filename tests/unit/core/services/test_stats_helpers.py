"""Unit tests for the pure helpers in services/stats_service.py"""

from datetime import date, datetime, timezone

from inkwell.core.services.stats_service import build_heatmap, compute_streak

TODAY = date(2026, 10, 18)


def _days(*offsets):
    return {date.fromordinal(TODAY.toordinal() - o) for o in offsets}


def test_streak_counts_back_from_today():
    assert compute_streak(_days(0, 1, 2), TODAY) == 3


def test_streak_may_end_yesterday():
    assert compute_streak(_days(1, 2, 3, 4), TODAY) == 4


def test_gap_breaks_streak():
    assert compute_streak(_days(0, 2, 3), TODAY) == 1
    assert compute_streak(_days(2, 3), TODAY) == 0


def test_no_activity():
    assert compute_streak(set(), TODAY) == 0


def test_heatmap_counts_per_day():
    stamps = [
        datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc),
        datetime(2026, 10, 17, 23, 59, tzinfo=timezone.utc),
        datetime(2026, 10, 18, 0, 1, tzinfo=timezone.utc),
    ]
    assert build_heatmap(stamps) == {"2026-10-17": 2, "2026-10-18": 1}


def test_heatmap_treats_naive_timestamps_as_utc():
    assert build_heatmap([datetime(2026, 1, 1, 12, 0)]) == {"2026-01-01": 1}
