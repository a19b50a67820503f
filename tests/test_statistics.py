"""Tests for aggregate statistics and statistics periods."""

from datetime import date

import pytest

from almanac.puzzles import GameKind
from almanac.stats import (
    ALL_TIME_START,
    CompletionRecord,
    StatisticsPeriod,
    all_games_statistics,
    game_statistics,
)

# A Wednesday
TODAY = date(2025, 3, 5)


def record(kind, day, seconds):
    return CompletionRecord(game_kind=kind, occurred_on=day, duration_seconds=seconds)


@pytest.fixture
def history():
    return [
        record(GameKind.WORDLE, date(2025, 2, 20), 30),
        record(GameKind.WORDLE, date(2025, 3, 3), 100),
        record(GameKind.WORDLE, date(2025, 3, 4), 50),
        record(GameKind.WORDLE, date(2025, 3, 4), 70),
        record(GameKind.PIPE, date(2025, 3, 4), 200),
        record(GameKind.SHIKAKU, date(2025, 3, 4), 150),
    ]


class TestStatisticsPeriod:
    """Tests for period date ranges."""

    def test_today(self):
        assert StatisticsPeriod.TODAY.date_range(TODAY) == (date(2025, 3, 5), date(2025, 3, 6))

    def test_week_starts_monday(self):
        """The week runs Monday to the following Monday."""
        assert StatisticsPeriod.THIS_WEEK.date_range(TODAY) == (date(2025, 3, 3), date(2025, 3, 10))

    def test_month(self):
        assert StatisticsPeriod.THIS_MONTH.date_range(TODAY) == (date(2025, 3, 1), date(2025, 4, 1))

    def test_december_rolls_over(self):
        """December ends on the first of January."""
        assert StatisticsPeriod.THIS_MONTH.date_range(date(2025, 12, 15)) == (
            date(2025, 12, 1), date(2026, 1, 1)
        )

    def test_all_time(self):
        """All time starts in 2020 and ends after today."""
        start, end = StatisticsPeriod.ALL_TIME.date_range(TODAY)
        assert start == ALL_TIME_START == date(2020, 1, 1)
        assert end > TODAY


class TestGameStatistics:
    """Tests for one game's aggregates."""

    def test_week_totals(self, history):
        """Totals, times and rate only count the period."""
        stats = game_statistics(history, GameKind.WORDLE, StatisticsPeriod.THIS_WEEK, TODAY)

        assert stats.total_completions == 3
        assert stats.total_play_time == 220
        assert stats.average_time == pytest.approx(220 / 3)
        assert stats.best_time == 50
        assert stats.completion_rate == pytest.approx(2 / 3)
        assert stats.last_played == date(2025, 3, 4)

    def test_streaks_use_whole_history(self, history):
        """Streaks ignore the period."""
        stats = game_statistics(history, GameKind.WORDLE, StatisticsPeriod.TODAY, TODAY)
        assert stats.total_completions == 0
        assert stats.current_streak == 2
        assert stats.longest_streak == 2

    def test_no_completions(self):
        """An empty history gives zeroed statistics."""
        stats = game_statistics([], GameKind.PIPE, StatisticsPeriod.ALL_TIME, TODAY)
        assert stats.total_completions == 0
        assert stats.average_time == 0.0
        assert stats.best_time is None
        assert stats.last_played is None
        assert stats.completion_rate == 0.0


class TestAllGamesStatistics:
    """Tests for aggregates over every selected game."""

    def test_week_aggregates(self, history):
        """Cross-game totals and the all-games streak."""
        kinds = list(GameKind)
        stats = all_games_statistics(history, kinds, StatisticsPeriod.THIS_WEEK, TODAY)

        assert stats.total_completions == 5
        assert stats.total_play_time == 570
        assert stats.completed_days == 2
        assert stats.average_completions_per_day == pytest.approx(5 / 3)
        assert stats.current_all_games_streak == 1
        assert stats.longest_all_games_streak == 1
        assert [g.game_kind for g in stats.games] == kinds

    def test_selected_subset(self, history):
        """Only the selected games get per-game statistics."""
        stats = all_games_statistics(history, [GameKind.PIPE], StatisticsPeriod.ALL_TIME, TODAY)
        assert len(stats.games) == 1
        assert stats.games[0].total_completions == 1
