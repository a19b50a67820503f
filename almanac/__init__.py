"""
Almanac: deterministic daily puzzle engines and progress statistics.
"""

from .puzzles import GameKind, PipeGame, ShikakuGame, WordleGame
from .daily import AlmanacConfig, DailySelector, SeededRandom
from .stats import CompletionRecord, StreakResult

__all__ = [
    "GameKind",
    "ShikakuGame",
    "PipeGame",
    "WordleGame",
    "AlmanacConfig",
    "DailySelector",
    "SeededRandom",
    "CompletionRecord",
    "StreakResult",
]
