"""
Consecutive-day streak computations.

Records are compared at day granularity: several completions on the same day
count once. A streak survives until the end of the day after its last
completion, so finishing yesterday but not yet today keeps it alive.
"""

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Set

from ..puzzles.models import GameKind
from .models import CompletionRecord, StreakResult

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def completion_days(
    records: Iterable[CompletionRecord], kind: Optional[GameKind] = None
) -> Set[date]:
    """Distinct days with at least one completion, optionally for a single game."""
    return {r.occurred_on for r in records if kind is None or r.game_kind == kind}


def perfect_days(records: Iterable[CompletionRecord], selected_kinds: Iterable[GameKind]) -> Set[date]:
    """Days on which every selected game was completed at least once."""
    selected = set(selected_kinds)
    if not selected:
        return set()
    kinds_by_day: Dict[date, Set[GameKind]] = {}
    for record in records:
        kinds_by_day.setdefault(record.occurred_on, set()).add(record.game_kind)
    return {day for day, kinds in kinds_by_day.items() if selected <= kinds}


def _walk_back(days: Set[date], start: date) -> int:
    count = 0
    day = start
    while day in days:
        count += 1
        day -= ONE_DAY
    return count


def _longest_run(days: Set[date]) -> int:
    longest = 0
    run = 0
    previous: Optional[date] = None
    for day in sorted(days):
        if previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        previous = day
    return longest


def current_streak(records: Iterable[CompletionRecord], today: date) -> int:
    """
    Length of the run of days ending at the most recent completion.

    The streak is 0 when the most recent completion is older than yesterday.
    """
    days = completion_days(records)
    if not days:
        return 0
    most_recent = max(days)
    if (today - most_recent).days > 1:
        logger.debug("Streak broken: last completion %s, today %s", most_recent, today)
        return 0
    return _walk_back(days, most_recent)


def longest_streak(records: Iterable[CompletionRecord]) -> int:
    """Longest run of consecutive completion days anywhere in the history."""
    return _longest_run(completion_days(records))


def all_games_streak(
    records: Iterable[CompletionRecord],
    selected_kinds: Iterable[GameKind],
    today: date,
) -> StreakResult:
    """
    Streak of days on which every selected game was completed.

    The current run is counted back from today, or from yesterday when today
    is not complete yet. No selected games means no streak.
    """
    days = perfect_days(records, selected_kinds)
    if not days:
        return StreakResult(current=0, longest=0)

    start = today if today in days else today - ONE_DAY
    result = StreakResult(current=_walk_back(days, start), longest=_longest_run(days))
    logger.debug("All-games streak on %s: %s", today, result)
    return result


def perfect_day_count(
    records: Iterable[CompletionRecord],
    selected_kinds: Iterable[GameKind],
    window_days: int,
    today: date,
) -> int:
    """Number of perfect days in ``[today - window_days, today]``, both ends included."""
    first = today - timedelta(days=window_days)
    return sum(1 for day in perfect_days(records, selected_kinds) if first <= day <= today)


def streaks_by_kind(
    records: Iterable[CompletionRecord],
    today: date,
    kinds: Iterable[GameKind] = tuple(GameKind),
) -> Dict[GameKind, StreakResult]:
    """Current and longest streak of each game."""
    records = list(records)
    results: Dict[GameKind, StreakResult] = {}
    for kind in kinds:
        own: List[CompletionRecord] = [r for r in records if r.game_kind == kind]
        results[kind] = StreakResult(
            current=current_streak(own, today),
            longest=longest_streak(own),
        )
    return results
