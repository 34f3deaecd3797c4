"""Mood Analytics - average, distribution, streak and trend over mood entries.

Invariants:
    - All functions are PURE: no IO, no clock reads (today is passed in)
    - Streak counts distinct calendar days ending today; several entries on
      one day count once, a day without entries ends the streak
    - Yearly trend averages per calendar month; shorter periods list entries

Design Decisions:
    - Distribution merges the default presets with the caller's custom moods;
      the first mood definition for a value wins
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from zenstudent.core.domain_types import TrendPeriod, DEFAULT_MOODS
from zenstudent.core.record_protocols import CustomMoodLike, MoodLike
from zenstudent.core.rounding import round_half_up

TREND_DAYS = {
    TrendPeriod.WEEKLY: 7,
    TrendPeriod.MONTHLY: 30,
    TrendPeriod.YEARLY: 365,
}


def average_mood(entries: Sequence[MoodLike]) -> float:
    if not entries:
        return 0.0
    return round_half_up(sum(e.mood for e in entries) / len(entries), 1)


def mood_catalog(custom: Iterable[CustomMoodLike] = ()) -> list[dict]:
    catalog = [m._asdict() for m in DEFAULT_MOODS]
    catalog.extend(
        {"emoji": c.emoji, "name": c.name, "value": c.value, "color": c.color}
        for c in custom
    )
    return catalog


def mood_distribution(
    entries: Sequence[MoodLike], custom: Iterable[CustomMoodLike] = (),
) -> list[dict]:
    counts: dict[int, int] = defaultdict(int)
    for e in entries:
        counts[e.mood] += 1
    rows, seen = [], set()
    for mood in mood_catalog(custom):
        if mood["value"] in seen or not counts.get(mood["value"]):
            continue
        seen.add(mood["value"])
        rows.append({**mood, "count": counts[mood["value"]]})
    return rows


def current_streak(entries: Iterable[MoodLike], today: date) -> int:
    logged = {e.date for e in entries}
    streak = 0
    while today - timedelta(days=streak) in logged:
        streak += 1
    return streak


def mood_trend(
    entries: Iterable[MoodLike], period: TrendPeriod, today: date,
) -> list[dict]:
    """Chart points for the period, oldest first."""
    days_back = TREND_DAYS.get(period)
    cutoff = today - timedelta(days=days_back) if days_back else date.min
    window = sorted(
        (e for e in entries if e.date >= cutoff), key=lambda e: e.date,
    )

    if period == TrendPeriod.YEARLY:
        months: dict[str, list[int]] = defaultdict(list)
        for e in window:
            months[e.date.strftime("%Y-%m")].append(e.mood)
        return [
            {
                "date": date.fromisoformat(f"{key}-01").strftime("%b"),
                "mood": round_half_up(sum(vals) / len(vals), 2),
                "fullDate": key,
            }
            for key, vals in sorted(months.items())
        ]

    return [
        {
            "date": f"{e.date.strftime('%b')} {e.date.day}",
            "mood": e.mood,
            "fullDate": e.date.isoformat(),
        }
        for e in window
    ]


def summarize_moods(
    entries: Iterable[MoodLike],
    custom: Iterable[CustomMoodLike],
    period: TrendPeriod,
    today: date,
) -> dict:
    entries = list(entries)
    return {
        "period": period.value,
        "count": len(entries),
        "average": average_mood(entries),
        "distribution": mood_distribution(entries, list(custom)),
        "streak": current_streak(entries, today),
        "trend": mood_trend(entries, period, today),
    }
