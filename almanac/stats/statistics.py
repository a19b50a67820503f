"""Per-game and cross-game aggregate statistics."""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Sequence, Tuple

from ..puzzles.models import GameKind
from .models import AllGamesStatistics, CompletionRecord, GameStatistics, StatisticsPeriod
from .streaks import all_games_streak, current_streak, longest_streak

logger = logging.getLogger(__name__)


def _in_range(records: Iterable[CompletionRecord], start: date, end: date) -> List[CompletionRecord]:
    return [r for r in records if start <= r.occurred_on < end]


def _elapsed_days(start: date, end: date, today: date) -> int:
    """Days of the period that have started by today, at least 1."""
    return max((min(end, today + timedelta(days=1)) - start).days, 1)


def _period_bounds(period: StatisticsPeriod, today: date) -> Tuple[date, date]:
    start, end = period.date_range(today)
    logger.debug("Statistics period %s covers %s to %s", period.value, start, end)
    return start, end


def game_statistics(
    records: Iterable[CompletionRecord],
    kind: GameKind,
    period: StatisticsPeriod,
    today: date,
) -> GameStatistics:
    """
    Aggregate one game's completions over a period.

    Totals and times only count completions inside the period, while the
    streaks always look at the whole history.
    """
    own = [r for r in records if r.game_kind == kind]
    start, end = _period_bounds(period, today)
    in_period = _in_range(own, start, end)

    durations = [r.duration_seconds for r in in_period]
    total_time = sum(durations)
    completed_days = len({r.occurred_on for r in in_period})

    return GameStatistics(
        game_kind=kind,
        total_completions=len(in_period),
        total_play_time=total_time,
        average_time=total_time / len(durations) if durations else 0.0,
        best_time=min(durations) if durations else None,
        current_streak=current_streak(own, today),
        longest_streak=longest_streak(own),
        completion_rate=completed_days / _elapsed_days(start, end, today),
        last_played=max((r.occurred_on for r in in_period), default=None),
    )


def all_games_statistics(
    records: Iterable[CompletionRecord],
    selected_kinds: Sequence[GameKind],
    period: StatisticsPeriod,
    today: date,
) -> AllGamesStatistics:
    """Aggregate every selected game over a period, plus the all-games streak."""
    records = list(records)
    start, end = _period_bounds(period, today)
    in_period = _in_range(records, start, end)

    streak = all_games_streak(records, selected_kinds, today)
    total = len(in_period)

    return AllGamesStatistics(
        total_play_time=sum(r.duration_seconds for r in in_period),
        total_completions=total,
        completed_days=len({r.occurred_on for r in in_period}),
        current_all_games_streak=streak.current,
        longest_all_games_streak=streak.longest,
        average_completions_per_day=total / _elapsed_days(start, end, today),
        games=[game_statistics(records, kind, period, today) for kind in selected_kinds],
    )
