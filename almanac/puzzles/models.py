"""Data models for the puzzle engines."""

from enum import Enum
from typing import FrozenSet, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, Field, model_validator


# Distinct, high-contrast colours handed out to rectangles in order
COLOR_PALETTE: List[str] = [
    "blue", "red", "green", "orange", "purple", "pink",
    "yellow", "brown", "cyan", "indigo", "mint", "teal",
]
INVALID_COLOR = "gray"


class GameKind(str, Enum):
    """The daily games of the almanac."""
    SHIKAKU = "shikaku"
    PIPE = "pipe"
    WORDLE = "wordle"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Direction(Enum):
    """One of the four cardinal directions on the grid."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) step taken when moving in this direction."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class GridPosition(NamedTuple):
    """A cell on the grid."""
    row: int
    col: int

    def adjacent(self, direction: Direction) -> "GridPosition":
        d_row, d_col = direction.delta
        return GridPosition(self.row + d_row, self.col + d_col)


# --- Shikaku ---------------------------------------------------------------

class Rectangle(BaseModel):
    """A player-drawn rectangle, always stored with normalized corners."""
    top_left: GridPosition
    bottom_right: GridPosition
    color_index: int = Field(default=0, ge=0)
    valid: bool = False

    @model_validator(mode="after")
    def _check_normalized(self) -> "Rectangle":
        if self.top_left.row > self.bottom_right.row or self.top_left.col > self.bottom_right.col:
            raise ValueError(
                f"Rectangle corners not normalized: {self.top_left} / {self.bottom_right}"
            )
        return self

    @classmethod
    def from_corners(cls, a: GridPosition, b: GridPosition, color_index: int = 0) -> "Rectangle":
        """Build a rectangle from two arbitrary opposite corners."""
        return cls(
            top_left=GridPosition(min(a.row, b.row), min(a.col, b.col)),
            bottom_right=GridPosition(max(a.row, b.row), max(a.col, b.col)),
            color_index=color_index,
        )

    @property
    def area(self) -> int:
        return (
            (self.bottom_right.row - self.top_left.row + 1)
            * (self.bottom_right.col - self.top_left.col + 1)
        )

    @property
    def color(self) -> str:
        return COLOR_PALETTE[self.color_index % len(COLOR_PALETTE)]

    def contains(self, position: GridPosition) -> bool:
        return (
            self.top_left.row <= position.row <= self.bottom_right.row
            and self.top_left.col <= position.col <= self.bottom_right.col
        )

    def overlaps(self, other: "Rectangle") -> bool:
        """True unless one rectangle lies entirely to one side of the other."""
        return not (
            self.bottom_right.col < other.top_left.col
            or other.bottom_right.col < self.top_left.col
            or self.bottom_right.row < other.top_left.row
            or other.bottom_right.row < self.top_left.row
        )

    def cells(self) -> List[GridPosition]:
        return [
            GridPosition(row, col)
            for row in range(self.top_left.row, self.bottom_right.row + 1)
            for col in range(self.top_left.col, self.bottom_right.col + 1)
        ]


class NumberClue(BaseModel):
    """A fixed number on one cell; the area of the rectangle that must cover it."""
    position: GridPosition
    value: int = Field(..., ge=1)
    satisfied: bool = False


class ShikakuValidation(BaseModel):
    """Result of validating a Shikaku board."""
    complete: bool
    rectangles: List[Rectangle] = Field(default_factory=list)
    clues: List[NumberClue] = Field(default_factory=list)
    uncovered_cells: List[GridPosition] = Field(default_factory=list)
    overlapping_cells: List[GridPosition] = Field(default_factory=list)

    @property
    def invalid_rectangles(self) -> List[Rectangle]:
        return [r for r in self.rectangles if not r.valid]

    @property
    def unsatisfied_clues(self) -> List[NumberClue]:
        return [c for c in self.clues if not c.satisfied]


# --- Pipe ------------------------------------------------------------------

class TileKind(str, Enum):
    """Shape of a pipe tile."""
    STRAIGHT = "straight"
    CORNER = "corner"
    DEAD_END = "deadEnd"
    T_JUNCTION = "tJunction"
    CROSS = "cross"

    def connections(self, rotation: int) -> FrozenSet[Direction]:
        """Directions this tile exposes at the given quarter-turn rotation."""
        return _CONNECTIONS[self][rotation % 4]

    def symbol(self, rotation: int) -> str:
        return _SYMBOLS[self][rotation % 4]


_U, _D, _L, _R = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT

_CONNECTIONS = {
    TileKind.STRAIGHT: (
        frozenset({_L, _R}), frozenset({_U, _D}), frozenset({_L, _R}), frozenset({_U, _D}),
    ),
    TileKind.CORNER: (
        frozenset({_D, _R}), frozenset({_L, _D}), frozenset({_L, _U}), frozenset({_U, _R}),
    ),
    TileKind.DEAD_END: (
        frozenset({_R}), frozenset({_U}), frozenset({_L}), frozenset({_D}),
    ),
    TileKind.T_JUNCTION: (
        frozenset({_L, _R, _D}), frozenset({_U, _D, _L}),
        frozenset({_L, _R, _U}), frozenset({_U, _D, _R}),
    ),
    TileKind.CROSS: (frozenset({_U, _D, _L, _R}),) * 4,
}

_SYMBOLS = {
    TileKind.STRAIGHT: ("━", "┃", "━", "┃"),
    TileKind.CORNER: ("┏", "┓", "┛", "┗"),
    TileKind.DEAD_END: ("╶", "╵", "╴", "╷"),
    TileKind.T_JUNCTION: ("┳", "┫", "┻", "┣"),
    TileKind.CROSS: ("╋",) * 4,
}


class Tile(BaseModel):
    """A rotatable pipe tile."""
    kind: TileKind
    rotation: int = Field(default=0, ge=0, le=3)
    locked: bool = False

    @property
    def connections(self) -> FrozenSet[Direction]:
        return self.kind.connections(self.rotation)

    @property
    def symbol(self) -> str:
        return self.kind.symbol(self.rotation)

    def rotated(self) -> "Tile":
        """The same tile turned one quarter."""
        return self.model_copy(update={"rotation": (self.rotation + 1) % 4})


class Connection(NamedTuple):
    """One directed edge out of a tile."""
    position: GridPosition
    direction: Direction

    @property
    def adjacent_position(self) -> GridPosition:
        return self.position.adjacent(self.direction)

    @property
    def return_direction(self) -> Direction:
        return self.direction.opposite()


# --- Wordle ----------------------------------------------------------------

class LetterState(str, Enum):
    """Feedback for a single guessed letter."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


# --- Level data ------------------------------------------------------------

class ClueData(BaseModel):
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    value: int = Field(..., ge=1)


class ShikakuLevel(BaseModel):
    """Level definition for the rectangle partition puzzle."""
    id: str
    grid_rows: int = Field(..., ge=1)
    grid_cols: int = Field(..., ge=1)
    clues: List[ClueData] = Field(default_factory=list)
    difficulty: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _check_clues_in_bounds(self) -> "ShikakuLevel":
        for clue in self.clues:
            if clue.row >= self.grid_rows or clue.col >= self.grid_cols:
                raise ValueError(
                    f"Clue at ({clue.row}, {clue.col}) outside {self.grid_rows}x{self.grid_cols} grid"
                )
        return self


class TileData(BaseModel):
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    kind: TileKind
    rotation: int = Field(default=0, ge=0, le=3)
    locked: bool = False


class PipeLevel(BaseModel):
    """Level definition for the pipe connectivity puzzle.

    Cells without an entry in ``tiles`` are filled with unlocked dead ends.
    """
    id: str
    grid_rows: int = Field(..., ge=1)
    grid_cols: int = Field(..., ge=1)
    start_row: int = Field(..., ge=0)
    start_col: int = Field(..., ge=0)
    end_row: int = Field(..., ge=0)
    end_col: int = Field(..., ge=0)
    tiles: List[TileData] = Field(default_factory=list)
    difficulty: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _check_positions_in_bounds(self) -> "PipeLevel":
        points = [(self.start_row, self.start_col), (self.end_row, self.end_col)]
        points.extend((t.row, t.col) for t in self.tiles)
        for row, col in points:
            if row >= self.grid_rows or col >= self.grid_cols:
                raise ValueError(
                    f"Position ({row}, {col}) outside {self.grid_rows}x{self.grid_cols} grid"
                )
        return self


class WordleLevel(BaseModel):
    """Level definition for the word-guess puzzle."""
    id: str
    target_word: str = Field(..., min_length=1, pattern=r'^[A-Za-z]+$')
    max_attempts: int = Field(default=6, ge=1)
    difficulty: int = Field(default=1, ge=1)


# --- Persisted state -------------------------------------------------------

class SavedRectangle(BaseModel):
    top_left_row: int
    top_left_col: int
    bottom_right_row: int
    bottom_right_col: int
    color_index: int = 0

    @classmethod
    def from_rectangle(cls, rect: Rectangle) -> "SavedRectangle":
        return cls(
            top_left_row=rect.top_left.row,
            top_left_col=rect.top_left.col,
            bottom_right_row=rect.bottom_right.row,
            bottom_right_col=rect.bottom_right.col,
            color_index=rect.color_index,
        )

    def to_rectangle(self) -> Rectangle:
        return Rectangle(
            top_left=GridPosition(self.top_left_row, self.top_left_col),
            bottom_right=GridPosition(self.bottom_right_row, self.bottom_right_col),
            color_index=self.color_index,
        )


class ShikakuStateData(BaseModel):
    grid_rows: int
    grid_cols: int
    clues: List[ClueData] = Field(default_factory=list)
    rectangles: List[SavedRectangle] = Field(default_factory=list)
    next_color_index: int = 0
    is_completed: bool = False


class PipeStateData(BaseModel):
    grid_rows: int
    grid_cols: int
    start: GridPosition
    end: GridPosition
    tiles: List[List[Tile]] = Field(default_factory=list)
    is_completed: bool = False


class WordleStateData(BaseModel):
    target_word: str
    max_attempts: int
    guesses: List[str] = Field(default_factory=list)
    current_attempt: str = ""
    is_completed: bool = False
    is_won: bool = False
    level_id: Optional[str] = None
