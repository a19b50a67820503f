"""Tests for badge criteria, experience and player level."""

from datetime import date, timedelta

from almanac.puzzles import GameKind
from almanac.stats import (
    BadgeType,
    CompletionRecord,
    earned_badges,
    experience_points,
    player_level,
)

TODAY = date(2025, 3, 7)
ALL = list(GameKind)


def record(kind=GameKind.WORDLE, offset=0, seconds=120.0):
    return CompletionRecord(
        game_kind=kind, occurred_on=TODAY - timedelta(days=offset), duration_seconds=seconds
    )


class TestEarnedBadges:
    """Tests for badge criteria."""

    def test_no_history(self):
        """Nothing is earned without completions."""
        assert earned_badges([], ALL, TODAY) == []

    def test_first_fast_win(self):
        """One quick completion earns first win and speed demon."""
        badges = earned_badges([record(seconds=45)], ALL, TODAY)
        assert badges == [BadgeType.FIRST_WIN, BadgeType.SPEED_DEMON]

    def test_slow_win_is_not_speedy(self):
        """Exactly sixty seconds is not fast enough."""
        assert BadgeType.SPEED_DEMON not in earned_badges([record(seconds=60)], ALL, TODAY)

    def test_week_streak(self):
        """Seven consecutive days of one game earn the week streak."""
        records = [record(offset=o) for o in range(7)]
        badges = earned_badges(records, ALL, TODAY)
        assert BadgeType.WEEK_STREAK in badges
        assert BadgeType.MONTH_STREAK not in badges

    def test_month_streak(self):
        """Thirty consecutive days earn both streak badges."""
        records = [record(offset=o) for o in range(40, 70)]
        badges = earned_badges(records, ALL, TODAY)
        assert BadgeType.WEEK_STREAK in badges
        assert BadgeType.MONTH_STREAK in badges

    def test_perfect_week(self):
        """Every game on each of the last seven days earns the perfect week."""
        records = [record(kind=k, offset=o) for k in ALL for o in range(7)]
        badges = earned_badges(records, ALL, TODAY)
        assert BadgeType.PERFECT_WEEK in badges
        assert BadgeType.ALL_GAMES_DAILY in badges

    def test_perfect_week_needs_today(self):
        """A perfect week ending yesterday does not count."""
        records = [record(kind=k, offset=o) for k in ALL for o in range(1, 8)]
        badges = earned_badges(records, ALL, TODAY)
        assert BadgeType.PERFECT_WEEK not in badges
        assert BadgeType.ALL_GAMES_DAILY not in badges

    def test_hundred_puzzles(self):
        """A hundred completions earn the hundred puzzles badge."""
        badges = earned_badges([record() for _ in range(100)], ALL, TODAY)
        assert badges == [BadgeType.FIRST_WIN, BadgeType.HUNDRED_PUZZLES]


class TestExperience:
    """Tests for experience points and levels."""

    def test_experience_sum(self):
        """Experience is the sum of badge rewards."""
        assert experience_points([BadgeType.FIRST_WIN, BadgeType.SPEED_DEMON]) == 40
        assert experience_points([]) == 0

    def test_levels(self):
        """Each thousand experience points adds a level."""
        assert player_level(0) == 1
        assert player_level(999) == 1
        assert player_level(1000) == 2
        assert player_level(2500) == 3
