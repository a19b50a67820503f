"""
Pydantic models for daily puzzle selection.

Holds the configuration the selector is built from and the bundle of levels
it hands out for one calendar day.
"""

from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator

from ..puzzles.models import GameKind, PipeLevel, ShikakuLevel, WordleLevel


DEFAULT_WORDS: List[str] = [
    "APPLE", "HAPPY", "LIGHT", "MUSIC", "PEACE",
    "SWIFT", "BRAVE", "GRACE", "TRUST", "DANCE",
    "WORLD", "DREAM", "MAGIC", "POWER", "YOUTH",
    "PHONE", "SMILE", "HEART", "HONOR", "SHINE",
    "QUEST", "BLEND", "FROST", "SPARK", "STORM",
    "CRANE",
]


class AlmanacConfig(BaseModel):
    """Configuration for daily puzzle selection and statistics."""
    word_list: List[str] = Field(default_factory=lambda: list(DEFAULT_WORDS))
    wordle_max_attempts: int = Field(default=6, ge=1)
    shikaku_levels: List[ShikakuLevel] = Field(default_factory=list)
    shikaku_grid_size: int = Field(default=5, ge=2, le=12)
    shikaku_max_area: int = Field(default=6, ge=2)
    pipe_min_size: int = Field(default=4, ge=2)
    pipe_size_variants: int = Field(default=3, ge=1)
    selected_games: List[GameKind] = Field(default_factory=lambda: list(GameKind))
    perfect_day_window: int = Field(default=30, ge=0)

    @field_validator("word_list")
    @classmethod
    def _normalize_words(cls, words: List[str]) -> List[str]:
        cleaned = [w.strip().upper() for w in words if w.strip()]
        if not cleaned:
            raise ValueError("word_list must contain at least one word")
        for word in cleaned:
            if not word.isalpha():
                raise ValueError(f"Invalid word in word_list: {word!r}")
        return cleaned


class DailyPuzzleSet(BaseModel):
    """The levels every player gets on a given day."""
    day: date
    seed: int
    shikaku: ShikakuLevel
    pipe: PipeLevel
    wordle: WordleLevel
