"""
Command line entry point for the almanac puzzles.

Usage:
    python -m almanac.main daily config.yaml
    python -m almanac.main daily config.yaml --date 2025-03-07 --verbose
    python -m almanac.main stats records.json --today 2025-03-07 --games shikaku wordle
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml

from .daily import AlmanacConfig, DailySelector
from .puzzles import GameKind, PipeGame, ShikakuGame
from .stats import (
    CompletionRecord,
    StatisticsPeriod,
    all_games_statistics,
    earned_badges,
    experience_points,
    perfect_day_count,
    player_level,
    streaks_by_kind,
)

logger = logging.getLogger(__name__)


def load_config(config_path: str) -> AlmanacConfig:
    """Load the almanac configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return AlmanacConfig(**(data or {}))


def load_records(records_path: str) -> List[CompletionRecord]:
    """Load completion records from a JSON list of objects."""
    path = Path(records_path)

    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {records_path}")

    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of records in {records_path}")
    return [CompletionRecord(**item) for item in data]


def _parse_date(value: Optional[str]) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def run_daily(config: AlmanacConfig, day: date) -> str:
    """Render the puzzles of one day as plain text."""
    puzzles = DailySelector(config).daily_set(day)
    pipe = PipeGame.from_level(puzzles.pipe)
    shikaku = ShikakuGame.from_level(puzzles.shikaku)

    lines = [
        f"=== Daily puzzles for {day.isoformat()} (seed {puzzles.seed}) ===",
        "",
        f"{GameKind.SHIKAKU.display_name} ({puzzles.shikaku.id})",
        shikaku.render(),
        "",
        f"{GameKind.PIPE.display_name} ({puzzles.pipe.id})",
        pipe.render(),
        "",
        f"{GameKind.WORDLE.display_name} ({puzzles.wordle.id})",
        f"{len(puzzles.wordle.target_word)} letters, {puzzles.wordle.max_attempts} attempts",
    ]
    return "\n".join(lines)


def run_stats(records: List[CompletionRecord], kinds: List[GameKind], today: date,
              window_days: int = 30) -> str:
    """Render streaks, statistics and badges as plain text."""
    lines = [f"=== Statistics as of {today.isoformat()} ==="]

    for kind, streak in streaks_by_kind(records, today, kinds).items():
        lines.append(f"{kind.display_name}: current {streak.current}, longest {streak.longest}")

    summary = all_games_statistics(records, kinds, StatisticsPeriod.ALL_TIME, today)
    perfect = perfect_day_count(records, kinds, window_days, today)
    lines.extend([
        "",
        f"Total completions: {summary.total_completions}",
        f"Total play time: {summary.total_play_time:.0f}s",
        f"All-games streak: current {summary.current_all_games_streak}, "
        f"longest {summary.longest_all_games_streak}",
        f"Perfect days (last {window_days} days): {perfect}",
    ])

    badges = earned_badges(records, kinds, today)
    xp = experience_points(badges)
    lines.append(f"Badges: {', '.join(b.value for b in badges) or 'none'}")
    lines.append(f"Experience: {xp} (level {player_level(xp)})")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Daily puzzles and progress statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list: [CRANE, SLATE, PIANO]
  shikaku_grid_size: 5
  pipe_min_size: 4
  selected_games: [shikaku, pipe, wordle]
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    daily_parser = subparsers.add_parser("daily", help="Print the puzzles of a day")
    daily_parser.add_argument("config", help="Path to YAML configuration file")
    daily_parser.add_argument("--date", help="Day to show as YYYY-MM-DD (default: today)")

    stats_parser = subparsers.add_parser("stats", help="Print streaks and statistics")
    stats_parser.add_argument("records", help="Path to a JSON list of completion records")
    stats_parser.add_argument("--today", help="Reference day as YYYY-MM-DD (default: today)")
    stats_parser.add_argument(
        "--games",
        nargs="+",
        choices=[k.value for k in GameKind],
        help="Games counted for perfect days (default: all)"
    )
    stats_parser.add_argument("--config", help="Optional YAML configuration file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "daily":
        try:
            config = load_config(args.config)
            day = _parse_date(args.date)
        except (OSError, ValueError, yaml.YAMLError, argparse.ArgumentTypeError) as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
        print(run_daily(config, day))
        return 0

    try:
        records = load_records(args.records)
        today = _parse_date(args.today)
        config = load_config(args.config) if args.config else AlmanacConfig()
    except (OSError, ValueError, yaml.YAMLError, argparse.ArgumentTypeError) as e:
        print(f"Error loading records: {e}", file=sys.stderr)
        return 1

    kinds = [GameKind(g) for g in args.games] if args.games else list(config.selected_games)
    logger.debug("Computing statistics for %d records", len(records))
    print(run_stats(records, kinds, today, config.perfect_day_window))
    return 0


if __name__ == "__main__":
    sys.exit(main())
