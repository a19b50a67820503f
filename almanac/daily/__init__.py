"""Daily puzzle selection and procedural level generation."""

from .rng import SeededRandom
from .models import DEFAULT_WORDS, AlmanacConfig, DailyPuzzleSet
from .generators import generate_pipe_level, generate_shikaku_level, tile_for_connections
from .selector import (
    EPOCH,
    DailySelector,
    daily_index,
    daily_level_id,
    daily_seed,
)

__all__ = [
    # Selection
    "DailySelector",
    "daily_seed",
    "daily_index",
    "daily_level_id",
    "EPOCH",
    # Generation
    "SeededRandom",
    "generate_pipe_level",
    "generate_shikaku_level",
    "tile_for_connections",
    # Configuration
    "AlmanacConfig",
    "DailyPuzzleSet",
    "DEFAULT_WORDS",
]
