"""
Deterministic daily puzzle selection.

Every value handed out here is a pure function of the calendar date: the same
day always yields the same word, the same Shikaku board and the same pipe
grid, on any machine and without a network connection.
"""

import logging
from datetime import date
from typing import Optional, Union

from ..puzzles.models import GameKind, PipeLevel, ShikakuLevel, WordleLevel
from .generators import generate_pipe_level, generate_shikaku_level
from .models import AlmanacConfig, DailyPuzzleSet
from .rng import SeededRandom

logger = logging.getLogger(__name__)

EPOCH = date(2024, 1, 1)
DAY_OFFSET_SHIFT = 100

# Salts keep the per-game generator streams apart for the same day
_SHIKAKU_SALT = 7919
_PIPE_SALT = 104729

DailyLevel = Union[ShikakuLevel, PipeLevel, WordleLevel]


def daily_seed(day: date) -> int:
    """Pack a date into an integer seed, e.g. 2025-03-07 -> 20250307."""
    return day.year * 10000 + day.month * 100 + day.day


def daily_index(day: date, pool_size: int) -> int:
    """
    Map a date onto an index into a pool of ``pool_size`` items.

    Raises:
        ValueError: If the pool is empty
    """
    if pool_size < 1:
        raise ValueError(f"Pool size must be at least 1, got {pool_size}")
    offset = (day - EPOCH).days + DAY_OFFSET_SHIFT
    return offset % pool_size


def daily_level_id(kind: GameKind, day: date) -> str:
    return f"{kind.value}_daily_{day.isoformat()}"


class DailySelector:
    """
    Picks or generates the levels of a given day.

    Args:
        config: Word pool, optional Shikaku pool and generator settings
    """

    def __init__(self, config: Optional[AlmanacConfig] = None):
        self.config = config if config is not None else AlmanacConfig()

    def wordle_level(self, day: date) -> WordleLevel:
        words = self.config.word_list
        word = words[daily_index(day, len(words))]
        logger.debug("Daily word for %s picked from a pool of %d", day, len(words))
        return WordleLevel(
            id=daily_level_id(GameKind.WORDLE, day),
            target_word=word,
            max_attempts=self.config.wordle_max_attempts,
        )

    def shikaku_level(self, day: date) -> ShikakuLevel:
        """Use the configured pool when there is one, otherwise generate a board."""
        pool = self.config.shikaku_levels
        if pool:
            level = pool[daily_index(day, len(pool))]
            logger.debug("Daily Shikaku for %s is pooled level %s", day, level.id)
            return level

        size = self.config.shikaku_grid_size
        rng = SeededRandom(daily_seed(day) + _SHIKAKU_SALT)
        return generate_shikaku_level(
            daily_level_id(GameKind.SHIKAKU, day),
            size,
            size,
            rng,
            max_area=self.config.shikaku_max_area,
        )

    def pipe_level(self, day: date) -> PipeLevel:
        seed = daily_seed(day)
        size = self.config.pipe_min_size + seed % self.config.pipe_size_variants
        rng = SeededRandom(seed + _PIPE_SALT)
        return generate_pipe_level(daily_level_id(GameKind.PIPE, day), size, size, rng)

    def level_for(self, kind: GameKind, day: date) -> DailyLevel:
        if kind is GameKind.SHIKAKU:
            return self.shikaku_level(day)
        if kind is GameKind.PIPE:
            return self.pipe_level(day)
        if kind is GameKind.WORDLE:
            return self.wordle_level(day)
        raise ValueError(f"Unknown game kind: {kind}")

    def daily_set(self, day: date) -> DailyPuzzleSet:
        """All of the day's levels at once."""
        puzzle_set = DailyPuzzleSet(
            day=day,
            seed=daily_seed(day),
            shikaku=self.shikaku_level(day),
            pipe=self.pipe_level(day),
            wordle=self.wordle_level(day),
        )
        logger.info("Prepared daily puzzles for %s (seed %d)", day, puzzle_set.seed)
        return puzzle_set
