"""Puzzle engines for the almanac daily games."""

from .models import (
    COLOR_PALETTE,
    GameKind,
    Direction,
    GridPosition,
    Rectangle,
    NumberClue,
    ShikakuValidation,
    TileKind,
    Tile,
    Connection,
    LetterState,
    ClueData,
    ShikakuLevel,
    TileData,
    PipeLevel,
    WordleLevel,
    SavedRectangle,
    ShikakuStateData,
    PipeStateData,
    WordleStateData,
)
from .shikaku import ShikakuGame
from .pipe import PipeGame
from .wordle import WordleGame, classify
from .grid import in_bounds, iter_cells, render_shikaku, render_pipes

__all__ = [
    # Engines
    "ShikakuGame",
    "PipeGame",
    "WordleGame",
    "classify",
    # Value types
    "COLOR_PALETTE",
    "GameKind",
    "Direction",
    "GridPosition",
    "Rectangle",
    "NumberClue",
    "ShikakuValidation",
    "TileKind",
    "Tile",
    "Connection",
    "LetterState",
    # Level data
    "ClueData",
    "ShikakuLevel",
    "TileData",
    "PipeLevel",
    "WordleLevel",
    # Persisted state
    "SavedRectangle",
    "ShikakuStateData",
    "PipeStateData",
    "WordleStateData",
    # Grid utilities
    "in_bounds",
    "iter_cells",
    "render_shikaku",
    "render_pipes",
]
