"""
Test suite for streak computations.

Covers:
- Current and longest streaks of one game
- All-games streaks and perfect days
- Day-granularity of completion records
"""

from datetime import date, datetime, timedelta

import pytest
from pydantic import ValidationError

from almanac.puzzles import GameKind
from almanac.stats import (
    CompletionRecord,
    StreakResult,
    all_games_streak,
    current_streak,
    longest_streak,
    perfect_day_count,
    streaks_by_kind,
)

TODAY = date(2025, 3, 7)
ALL = list(GameKind)


def records_on(*offsets, kind=GameKind.WORDLE, duration=90.0):
    """Completions of one game on TODAY minus each offset."""
    return [
        CompletionRecord(game_kind=kind, occurred_on=TODAY - timedelta(days=o), duration_seconds=duration)
        for o in offsets
    ]


def perfect_on(*offsets, kinds=ALL):
    records = []
    for kind in kinds:
        records.extend(records_on(*offsets, kind=kind))
    return records


class TestCompletionRecord:
    """Tests for the record model."""

    def test_datetime_truncated(self):
        """A datetime is reduced to its calendar day."""
        record = CompletionRecord(game_kind="pipe", occurred_on=datetime(2025, 3, 7, 23, 59))
        assert record.occurred_on == date(2025, 3, 7)

    def test_iso_datetime_string_truncated(self):
        """An ISO datetime string is reduced to its calendar day."""
        record = CompletionRecord(game_kind="pipe", occurred_on="2025-03-07T08:30:00")
        assert record.occurred_on == date(2025, 3, 7)

    @pytest.mark.parametrize("value", [
        "2025-03-07 09:15:00",
        "2025-03-07T23:10:00Z",
        "2025-03-07T06:00:00+02:00",
    ])
    def test_datetime_string_variants_truncated(self, value):
        """Space separators, a Z suffix and offsets all reduce to the calendar day."""
        record = CompletionRecord(game_kind="wordle", occurred_on=value)
        assert record.occurred_on == date(2025, 3, 7)

    def test_malformed_datetime_string_rejected(self):
        """An unparseable datetime string fails validation."""
        with pytest.raises(ValidationError):
            CompletionRecord(game_kind="wordle", occurred_on="2025-03-07 25:99")

    def test_negative_duration_rejected(self):
        """Durations cannot be negative."""
        with pytest.raises(ValidationError):
            CompletionRecord(game_kind="pipe", occurred_on=TODAY, duration_seconds=-1)


class TestCurrentStreak:
    """Tests for the streak ending at the latest completion."""

    def test_three_consecutive_days(self):
        """Today, yesterday and the day before give 3."""
        assert current_streak(records_on(0, 1, 2), TODAY) == 3

    def test_gap_breaks_walk(self):
        """With yesterday missing only today counts."""
        assert current_streak(records_on(0, 2, 3), TODAY) == 1

    def test_yesterday_keeps_streak(self):
        """A run ending yesterday is still current."""
        assert current_streak(records_on(1, 2), TODAY) == 2

    def test_two_days_ago_is_broken(self):
        """A run ending two days ago is broken."""
        assert current_streak(records_on(2, 3, 4), TODAY) == 0

    def test_duplicates_count_once(self):
        """Several completions on one day count once."""
        assert current_streak(records_on(0, 0, 0, 1), TODAY) == 2

    def test_unordered_records(self):
        """Record order does not matter."""
        assert current_streak(records_on(2, 0, 1), TODAY) == 3

    def test_no_records(self):
        """No history means no streak."""
        assert current_streak([], TODAY) == 0


class TestLongestStreak:
    """Tests for the longest run in the history."""

    def test_longest_run_anywhere(self):
        """An older run longer than the current one is reported."""
        records = records_on(0, 2, 3, 10, 11, 12, 13)
        assert longest_streak(records) == 4
        assert current_streak(records, TODAY) == 1

    def test_single_day(self):
        assert longest_streak(records_on(5)) == 1

    def test_empty(self):
        assert longest_streak([]) == 0


class TestAllGamesStreak:
    """Tests for streaks over every selected game."""

    def test_today_complete(self):
        """Counting starts today when every game is done today."""
        assert all_games_streak(perfect_on(0, 1, 2), ALL, TODAY) == StreakResult(current=3, longest=3)

    def test_today_incomplete_counts_from_yesterday(self):
        """An unfinished today does not break the run ending yesterday."""
        records = perfect_on(1, 2) + records_on(0, kind=GameKind.PIPE)
        assert all_games_streak(records, ALL, TODAY).current == 2

    def test_partial_day_breaks_run(self):
        """A day missing one game breaks the all-games run."""
        records = perfect_on(0, 2, 3, 4) + records_on(1, kind=GameKind.WORDLE)
        result = all_games_streak(records, ALL, TODAY)
        assert result.current == 1
        assert result.longest == 3

    def test_subset_of_games(self):
        """Only selected games are required."""
        records = records_on(0, 1, kind=GameKind.WORDLE) + records_on(0, 1, kind=GameKind.PIPE)
        selected = [GameKind.WORDLE, GameKind.PIPE]
        assert all_games_streak(records, selected, TODAY).current == 2
        assert all_games_streak(records, ALL, TODAY).current == 0

    def test_no_selected_games(self):
        """Selecting nothing gives no streak."""
        assert all_games_streak(perfect_on(0), [], TODAY) == StreakResult(current=0, longest=0)


class TestPerfectDays:
    """Tests for perfect day counting."""

    def test_window_is_inclusive(self):
        """Both today and the first day of the window count."""
        records = perfect_on(0, 30, 31)
        assert perfect_day_count(records, ALL, 30, TODAY) == 2

    def test_partial_days_not_counted(self):
        """Days missing a selected game are not perfect."""
        records = perfect_on(0) + records_on(1, kind=GameKind.SHIKAKU)
        assert perfect_day_count(records, ALL, 30, TODAY) == 1

    def test_future_days_ignored(self):
        """Completions after today fall outside the window."""
        records = perfect_on(-1, 0)
        assert perfect_day_count(records, ALL, 30, TODAY) == 1

    def test_no_selected_games(self):
        assert perfect_day_count(perfect_on(0), [], 30, TODAY) == 0


class TestStreaksByKind:
    """Tests for per-game streak maps."""

    def test_each_kind_separate(self):
        """Each game gets its own streak."""
        records = records_on(0, 1, 2, kind=GameKind.WORDLE) + records_on(0, kind=GameKind.PIPE)
        streaks = streaks_by_kind(records, TODAY)

        assert streaks[GameKind.WORDLE] == StreakResult(current=3, longest=3)
        assert streaks[GameKind.PIPE] == StreakResult(current=1, longest=1)
        assert streaks[GameKind.SHIKAKU] == StreakResult(current=0, longest=0)
