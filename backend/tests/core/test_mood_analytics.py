"""Mood Analytics - average, distribution, streak and trend.

Invariants:
    - Streak counts distinct days; two entries on one day count once
    - Distribution includes custom moods and omits zero counts
"""

from datetime import date, timedelta
from types import SimpleNamespace

from zenstudent.core.domain_types import TrendPeriod
from zenstudent.core.mood_analytics import (
    average_mood, current_streak, mood_distribution, mood_trend,
    summarize_moods,
)

TODAY = date(2026, 10, 19)


def _entry(mood, days_ago=0):
    return SimpleNamespace(mood=mood, date=TODAY - timedelta(days=days_ago))


def test_average_rounds_to_one_decimal():
    assert average_mood([_entry(5), _entry(4), _entry(4)]) == 4.3
    assert average_mood([]) == 0.0


def test_streak_counts_distinct_consecutive_days():
    entries = [_entry(4, 0), _entry(3, 0), _entry(5, 1), _entry(2, 2), _entry(4, 4)]
    assert current_streak(entries, TODAY) == 3


def test_streak_is_zero_without_entry_today():
    assert current_streak([_entry(4, 1), _entry(4, 2)], TODAY) == 0


def test_distribution_includes_custom_moods_and_drops_zero_counts():
    custom = [SimpleNamespace(emoji="🤯", name="Overwhelmed", value=1, color="#9C27B0")]
    rows = mood_distribution([_entry(5), _entry(5), _entry(1)], custom)
    assert [(r["name"], r["count"]) for r in rows] == [
        ("Excellent", 2), ("Terrible", 1),
    ]


def test_weekly_trend_lists_entries_oldest_first():
    trend = mood_trend([_entry(3, 0), _entry(5, 2), _entry(1, 30)], TrendPeriod.WEEKLY, TODAY)
    assert trend == [
        {"date": "Oct 17", "mood": 5, "fullDate": "2026-10-17"},
        {"date": "Oct 19", "mood": 3, "fullDate": "2026-10-19"},
    ]


def test_yearly_trend_averages_per_month():
    entries = [
        SimpleNamespace(mood=4, date=date(2026, 9, 2)),
        SimpleNamespace(mood=5, date=date(2026, 9, 20)),
        SimpleNamespace(mood=2, date=date(2026, 10, 1)),
    ]
    assert mood_trend(entries, TrendPeriod.YEARLY, TODAY) == [
        {"date": "Sep", "mood": 4.5, "fullDate": "2026-09"},
        {"date": "Oct", "mood": 2.0, "fullDate": "2026-10"},
    ]


def test_summary_shape():
    summary = summarize_moods([_entry(4)], [], TrendPeriod.MONTHLY, TODAY)
    assert summary["period"] == "monthly"
    assert summary["count"] == 1
    assert summary["average"] == 4.0
    assert summary["streak"] == 1
    assert len(summary["trend"]) == 1
