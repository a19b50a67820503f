"""Streaks, statistics and badges over the completion history."""

from .models import (
    ALL_TIME_START,
    AllGamesStatistics,
    CompletionRecord,
    GameStatistics,
    StatisticsPeriod,
    StreakResult,
)
from .streaks import (
    all_games_streak,
    completion_days,
    current_streak,
    longest_streak,
    perfect_day_count,
    perfect_days,
    streaks_by_kind,
)
from .statistics import all_games_statistics, game_statistics
from .badges import BadgeType, earned_badges, experience_points, player_level

__all__ = [
    # Records and results
    "CompletionRecord",
    "StreakResult",
    "GameStatistics",
    "AllGamesStatistics",
    "StatisticsPeriod",
    "ALL_TIME_START",
    # Streaks
    "current_streak",
    "longest_streak",
    "all_games_streak",
    "perfect_day_count",
    "perfect_days",
    "completion_days",
    "streaks_by_kind",
    # Statistics
    "game_statistics",
    "all_games_statistics",
    # Badges
    "BadgeType",
    "earned_badges",
    "experience_points",
    "player_level",
]
