"""
Rectangle partition validator for Shikaku boards.

A board is complete when every clue sits in exactly one rectangle whose area
equals the clue, every rectangle holds exactly one clue, and every cell of the
grid is covered by exactly one rectangle.
"""

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .grid import in_bounds, iter_cells, render_shikaku
from .models import (
    COLOR_PALETTE,
    INVALID_COLOR,
    ClueData,
    GridPosition,
    NumberClue,
    Rectangle,
    SavedRectangle,
    ShikakuLevel,
    ShikakuStateData,
    ShikakuValidation,
)

logger = logging.getLogger(__name__)


class ShikakuGame(BaseModel):
    """
    Mutable Shikaku board state.

    Rectangles are only changed through ``add_or_replace``, ``remove`` and
    ``clear``; each of them re-runs ``validate`` so the ``valid`` and
    ``satisfied`` flags always reflect the current rectangles.

    Attributes:
        grid_rows: Number of rows in the grid
        grid_cols: Number of columns in the grid
        clues: The fixed number clues of the level
        rectangles: Rectangles drawn so far, in drawing order
        color_index: Palette index handed to the next rectangle
    """

    grid_rows: int = Field(default=5, ge=1)
    grid_cols: int = Field(default=5, ge=1)
    clues: List[NumberClue] = Field(default_factory=list)
    rectangles: List[Rectangle] = Field(default_factory=list)
    color_index: int = Field(default=0, ge=0)

    def model_post_init(self, __context) -> None:
        """Bring derived flags in line with the initial rectangles."""
        self.validate()

    @classmethod
    def from_level(cls, level: ShikakuLevel) -> "ShikakuGame":
        """Create an empty board for a level."""
        game = cls(
            grid_rows=level.grid_rows,
            grid_cols=level.grid_cols,
            clues=[
                NumberClue(position=GridPosition(c.row, c.col), value=c.value)
                for c in level.clues
            ],
        )
        logger.debug(
            "Loaded Shikaku level %s: %dx%d with %d clues",
            level.id, level.grid_rows, level.grid_cols, len(level.clues),
        )
        return game

    @property
    def is_complete(self) -> bool:
        return self.validate().complete

    def has_rectangle_at(self, position: GridPosition) -> bool:
        return any(r.contains(position) for r in self.rectangles)

    def _clues_in(self, rect: Rectangle) -> List[NumberClue]:
        return [c for c in self.clues if rect.contains(c.position)]

    def _is_rectangle_valid(self, rect: Rectangle) -> bool:
        contained = self._clues_in(rect)
        return len(contained) == 1 and contained[0].value == rect.area

    def _is_clue_satisfied(self, clue: NumberClue) -> bool:
        containing = [r for r in self.rectangles if r.contains(clue.position)]
        return len(containing) == 1 and containing[0].area == clue.value

    def preview_validate(self, corner_a: GridPosition, corner_b: GridPosition) -> Tuple[bool, str]:
        """
        Check a rectangle that is still being drawn, without committing it.

        Returns:
            (valid, color) where color is the next palette colour if valid,
            otherwise the neutral invalid colour (also for off-grid corners)
        """
        if not (in_bounds(corner_a, self.grid_rows, self.grid_cols)
                and in_bounds(corner_b, self.grid_rows, self.grid_cols)):
            return False, INVALID_COLOR

        preview = Rectangle.from_corners(corner_a, corner_b)
        valid = self._is_rectangle_valid(preview)
        color = COLOR_PALETTE[self.color_index % len(COLOR_PALETTE)]
        return valid, (color if valid else INVALID_COLOR)

    def add_or_replace(self, corner_a: GridPosition, corner_b: GridPosition) -> Optional[Rectangle]:
        """
        Commit a rectangle spanning two corners.

        Every existing rectangle overlapping the new one is removed first.
        Corners outside the grid are ignored and the board is left unchanged.

        Returns:
            The committed rectangle (with its validity flag), or None when the
            corners are off the grid
        """
        if not (in_bounds(corner_a, self.grid_rows, self.grid_cols)
                and in_bounds(corner_b, self.grid_rows, self.grid_cols)):
            logger.debug("Ignoring rectangle with off-grid corners %s, %s", corner_a, corner_b)
            return None

        new_rect = Rectangle.from_corners(corner_a, corner_b, color_index=self.color_index)
        self.color_index += 1

        kept = [r for r in self.rectangles if not r.overlaps(new_rect)]
        replaced = len(self.rectangles) - len(kept)
        self.rectangles = kept + [new_rect]
        self.validate()

        committed = self.rectangles[-1]
        logger.debug(
            "Rectangle %s-%s (area %d) valid=%s, replaced %d",
            committed.top_left, committed.bottom_right, committed.area, committed.valid, replaced,
        )
        return committed

    def remove(self, at: GridPosition) -> None:
        """Delete every rectangle containing a position."""
        self.rectangles = [r for r in self.rectangles if not r.contains(at)]
        self.validate()

    def clear(self) -> None:
        """Remove all rectangles and restart the palette."""
        self.rectangles = []
        self.color_index = 0
        self.validate()

    def validate(self) -> ShikakuValidation:
        """
        Recompute rectangle validity, clue satisfaction and completeness.

        Refreshes the ``valid``/``satisfied`` flags held on this board and
        returns a snapshot including coverage diagnostics.
        """
        self.rectangles = [
            r.model_copy(update={"valid": self._is_rectangle_valid(r)}) for r in self.rectangles
        ]
        self.clues = [
            c.model_copy(update={"satisfied": self._is_clue_satisfied(c)}) for c in self.clues
        ]

        uncovered: List[GridPosition] = []
        overlapping: List[GridPosition] = []
        for cell in iter_cells(self.grid_rows, self.grid_cols):
            count = sum(1 for r in self.rectangles if r.contains(cell))
            if count == 0:
                uncovered.append(cell)
            elif count > 1:
                overlapping.append(cell)

        complete = (
            all(c.satisfied for c in self.clues)
            and all(r.valid for r in self.rectangles)
            and not uncovered
            and not overlapping
        )

        return ShikakuValidation(
            complete=complete,
            rectangles=list(self.rectangles),
            clues=list(self.clues),
            uncovered_cells=uncovered,
            overlapping_cells=overlapping,
        )

    def render(self) -> str:
        return render_shikaku(self.grid_rows, self.grid_cols, self.clues, self.rectangles)

    def get_state_data(self) -> ShikakuStateData:
        """Snapshot everything needed to rebuild this board."""
        return ShikakuStateData(
            grid_rows=self.grid_rows,
            grid_cols=self.grid_cols,
            clues=[
                ClueData(row=c.position.row, col=c.position.col, value=c.value)
                for c in self.clues
            ],
            rectangles=[SavedRectangle.from_rectangle(r) for r in self.rectangles],
            next_color_index=self.color_index,
            is_completed=self.is_complete,
        )

    @classmethod
    def from_state_data(cls, data: ShikakuStateData) -> "ShikakuGame":
        """Rebuild a board from a snapshot produced by ``get_state_data``."""
        return cls(
            grid_rows=data.grid_rows,
            grid_cols=data.grid_cols,
            clues=[
                NumberClue(position=GridPosition(c.row, c.col), value=c.value)
                for c in data.clues
            ],
            rectangles=[r.to_rectangle() for r in data.rectangles],
            color_index=data.next_color_index,
        )
