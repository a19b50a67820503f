"""Badge criteria evaluated over the completion history."""

import logging
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, List, Sequence

from ..puzzles.models import GameKind
from .models import CompletionRecord
from .streaks import longest_streak, perfect_days

logger = logging.getLogger(__name__)

XP_PER_LEVEL = 1000
SPEED_DEMON_SECONDS = 60
HUNDRED = 100


class BadgeType(str, Enum):
    FIRST_WIN = "first_win"
    WEEK_STREAK = "week_streak"
    MONTH_STREAK = "month_streak"
    SPEED_DEMON = "speed_demon"
    PERFECT_WEEK = "perfect_week"
    ALL_GAMES_DAILY = "all_games_daily"
    HUNDRED_PUZZLES = "hundred_puzzles"

    @property
    def experience(self) -> int:
        """Experience points granted when the badge is earned."""
        return _EXPERIENCE[self]


_EXPERIENCE = {
    BadgeType.FIRST_WIN: 10,
    BadgeType.WEEK_STREAK: 50,
    BadgeType.MONTH_STREAK: 200,
    BadgeType.SPEED_DEMON: 30,
    BadgeType.PERFECT_WEEK: 100,
    BadgeType.ALL_GAMES_DAILY: 40,
    BadgeType.HUNDRED_PUZZLES: 150,
}


def earned_badges(
    records: Iterable[CompletionRecord],
    selected_kinds: Sequence[GameKind],
    today: date,
) -> List[BadgeType]:
    """
    Every badge whose criterion holds for the history, in declaration order.

    Streak badges look at the longest streak of any single game. Perfect
    week needs all selected games on each of the seven days ending today.
    """
    records = list(records)
    if not records:
        return []

    best_streak = max(
        longest_streak([r for r in records if r.game_kind == kind]) for kind in GameKind
    )
    perfect = perfect_days(records, selected_kinds)
    last_week = {today - timedelta(days=offset) for offset in range(7)}

    criteria = {
        BadgeType.FIRST_WIN: True,
        BadgeType.WEEK_STREAK: best_streak >= 7,
        BadgeType.MONTH_STREAK: best_streak >= 30,
        BadgeType.SPEED_DEMON: any(r.duration_seconds < SPEED_DEMON_SECONDS for r in records),
        BadgeType.PERFECT_WEEK: last_week <= perfect,
        BadgeType.ALL_GAMES_DAILY: today in perfect,
        BadgeType.HUNDRED_PUZZLES: len(records) >= HUNDRED,
    }
    earned = [badge for badge in BadgeType if criteria[badge]]
    logger.debug("Earned badges: %s", [b.value for b in earned])
    return earned


def experience_points(badges: Iterable[BadgeType]) -> int:
    return sum(badge.experience for badge in badges)


def player_level(experience: int) -> int:
    """Level 1 starts at 0 XP, each further level takes another 1000."""
    return experience // XP_PER_LEVEL + 1
