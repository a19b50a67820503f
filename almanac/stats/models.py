"""Data models for completion history and derived statistics."""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..puzzles.models import GameKind


ALL_TIME_START = date(2020, 1, 1)


class CompletionRecord(BaseModel):
    """
    One finished puzzle.

    Attributes:
        game_kind: Which game was completed
        occurred_on: Calendar day of the completion; datetimes are truncated
        duration_seconds: Wall-clock time spent solving
    """
    game_kind: GameKind
    occurred_on: date
    duration_seconds: float = Field(default=0.0, ge=0)

    model_config = {"frozen": True}

    @field_validator("occurred_on", mode="before")
    @classmethod
    def _truncate_to_day(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and ":" in value:
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value).date()
        return value


class StreakResult(BaseModel):
    current: int = 0
    longest: int = 0


class StatisticsPeriod(str, Enum):
    """Time window used for aggregate statistics."""
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    ALL_TIME = "all_time"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").capitalize()

    def date_range(self, today: date) -> Tuple[date, date]:
        """
        Half-open ``[start, end)`` range of days covered by the period.

        Weeks start on Monday. All time starts on 2020-01-01 and ends about ten
        years after today.
        """
        if self is StatisticsPeriod.TODAY:
            return today, today + timedelta(days=1)
        if self is StatisticsPeriod.THIS_WEEK:
            start = today - timedelta(days=today.weekday())
            return start, start + timedelta(days=7)
        if self is StatisticsPeriod.THIS_MONTH:
            start = today.replace(day=1)
            if start.month == 12:
                end = start.replace(year=start.year + 1, month=1)
            else:
                end = start.replace(month=start.month + 1)
            return start, end
        return ALL_TIME_START, today + timedelta(days=3650)


class GameStatistics(BaseModel):
    """Aggregates for one game over a period."""
    game_kind: GameKind
    total_completions: int = 0
    total_play_time: float = 0.0
    average_time: float = 0.0
    best_time: Optional[float] = None
    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: float = 0.0
    last_played: Optional[date] = None


class AllGamesStatistics(BaseModel):
    """Aggregates across every selected game over a period."""
    total_play_time: float = 0.0
    total_completions: int = 0
    completed_days: int = 0
    current_all_games_streak: int = 0
    longest_all_games_streak: int = 0
    average_completions_per_day: float = 0.0
    games: List[GameStatistics] = Field(default_factory=list)
