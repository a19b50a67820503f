"""
Directional-tile connectivity solver for the pipe puzzle.

Each tile exposes a set of directions depending on its kind and rotation. Two
neighbouring tiles are joined when both expose the shared edge. The puzzle is
solved when water from the start reaches the end and no exposed connection
anywhere on the grid is left open.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Sequence, Set, Tuple

from pydantic import BaseModel, Field, model_validator

from .grid import in_bounds, iter_cells, render_pipes
from .models import (
    Connection,
    Direction,
    GridPosition,
    PipeLevel,
    PipeStateData,
    Tile,
    TileKind,
)

logger = logging.getLogger(__name__)

DEFAULT_DIRECTION_ORDER: Tuple[Direction, ...] = (
    Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
)


class PipeGame(BaseModel):
    """
    Pipe grid state.

    Attributes:
        grid_rows: Number of rows in the grid
        grid_cols: Number of columns in the grid
        tiles: Row-major 2-D array of tiles
        start: The water source cell
        end: The cell that must be reached
    """

    grid_rows: int = Field(default=4, ge=1)
    grid_cols: int = Field(default=4, ge=1)
    tiles: List[List[Tile]] = Field(default_factory=list)
    start: GridPosition = GridPosition(0, 0)
    end: GridPosition = GridPosition(0, 0)

    @model_validator(mode="after")
    def _check_endpoints_in_bounds(self) -> "PipeGame":
        for name, position in (("start", self.start), ("end", self.end)):
            if not in_bounds(position, self.grid_rows, self.grid_cols):
                raise ValueError(
                    f"{name} {tuple(position)} outside {self.grid_rows}x{self.grid_cols} grid"
                )
        return self

    def model_post_init(self, __context) -> None:
        """Fill a missing or short grid with unlocked dead ends."""
        if len(self.tiles) != self.grid_rows or any(len(r) != self.grid_cols for r in self.tiles):
            filled = [
                [Tile(kind=TileKind.DEAD_END) for _ in range(self.grid_cols)]
                for _ in range(self.grid_rows)
            ]
            for row, tile_row in enumerate(self.tiles[:self.grid_rows]):
                for col, tile in enumerate(tile_row[:self.grid_cols]):
                    filled[row][col] = tile
            self.tiles = filled

    @classmethod
    def from_level(cls, level: PipeLevel) -> "PipeGame":
        """Create a grid from level data; unspecified cells become dead ends."""
        tiles = [
            [Tile(kind=TileKind.DEAD_END) for _ in range(level.grid_cols)]
            for _ in range(level.grid_rows)
        ]
        for data in level.tiles:
            tiles[data.row][data.col] = Tile(
                kind=data.kind, rotation=data.rotation, locked=data.locked
            )

        game = cls(
            grid_rows=level.grid_rows,
            grid_cols=level.grid_cols,
            tiles=tiles,
            start=GridPosition(level.start_row, level.start_col),
            end=GridPosition(level.end_row, level.end_col),
        )
        logger.debug(
            "Loaded pipe level %s: %dx%d, start %s, end %s",
            level.id, level.grid_rows, level.grid_cols, game.start, game.end,
        )
        return game

    def tile_at(self, position: GridPosition) -> Optional[Tile]:
        if not in_bounds(position, self.grid_rows, self.grid_cols):
            return None
        return self.tiles[position.row][position.col]

    def _is_reciprocated(self, connection: Connection) -> bool:
        neighbour = self.tile_at(connection.adjacent_position)
        return neighbour is not None and connection.return_direction in neighbour.connections

    def rotate(self, at: GridPosition) -> None:
        """Turn the tile at a position one quarter, unless locked or off the grid."""
        tile = self.tile_at(at)
        if tile is None or tile.locked:
            return
        self.tiles[at.row][at.col] = tile.rotated()

    def scramble(self, rng) -> None:
        """
        Randomize the rotation of every unlocked tile.

        Args:
            rng: Any object with ``next_int(low, high)``, e.g. SeededRandom
        """
        for position in iter_cells(self.grid_rows, self.grid_cols):
            tile = self.tiles[position.row][position.col]
            if not tile.locked:
                self.tiles[position.row][position.col] = tile.model_copy(
                    update={"rotation": rng.next_int(0, 4)}
                )

    def reset(self) -> None:
        """Put every unlocked tile back to rotation 0."""
        for position in iter_cells(self.grid_rows, self.grid_cols):
            tile = self.tiles[position.row][position.col]
            if not tile.locked:
                self.tiles[position.row][position.col] = tile.model_copy(update={"rotation": 0})

    def connected_positions(
        self, direction_order: Sequence[Direction] = DEFAULT_DIRECTION_ORDER
    ) -> Set[GridPosition]:
        """Breadth-first flood from the start through reciprocated edges."""
        connected: Set[GridPosition] = {self.start}
        queue: Deque[GridPosition] = deque([self.start])

        while queue:
            current = queue.popleft()
            exposed = self.tiles[current.row][current.col].connections
            for direction in direction_order:
                if direction not in exposed:
                    continue
                connection = Connection(current, direction)
                neighbour = connection.adjacent_position
                if neighbour in connected or not self._is_reciprocated(connection):
                    continue
                connected.add(neighbour)
                queue.append(neighbour)

        return connected

    def leaking_connections(self) -> Set[Connection]:
        """Every exposed connection on the grid without a matching neighbour."""
        leaks: Set[Connection] = set()
        for position in iter_cells(self.grid_rows, self.grid_cols):
            for direction in self.tiles[position.row][position.col].connections:
                connection = Connection(position, direction)
                if not self._is_reciprocated(connection):
                    leaks.add(connection)
        return leaks

    def connectivity(
        self, direction_order: Sequence[Direction] = DEFAULT_DIRECTION_ORDER
    ) -> Tuple[Set[GridPosition], Set[Connection]]:
        """
        Compute the cells reachable from the start and the set of leaks.

        The start cell is always part of the connected set.
        """
        return self.connected_positions(direction_order), self.leaking_connections()

    def is_solved(self) -> bool:
        connected, leaks = self.connectivity()
        if leaks:
            return False
        return self.end == self.start or self.end in connected

    def has_leak_at(self, position: GridPosition) -> bool:
        return any(leak.position == position for leak in self.leaking_connections())

    def is_connected_to_start(self, position: GridPosition) -> bool:
        return position in self.connected_positions()

    def render(self) -> str:
        return render_pipes(self.tiles, self.start, self.end)

    def get_state_data(self) -> PipeStateData:
        """Snapshot everything needed to rebuild this grid."""
        return PipeStateData(
            grid_rows=self.grid_rows,
            grid_cols=self.grid_cols,
            start=self.start,
            end=self.end,
            tiles=[[t.model_copy() for t in row] for row in self.tiles],
            is_completed=self.is_solved(),
        )

    @classmethod
    def from_state_data(cls, data: PipeStateData) -> "PipeGame":
        """Rebuild a grid from a snapshot produced by ``get_state_data``."""
        return cls(
            grid_rows=data.grid_rows,
            grid_cols=data.grid_cols,
            tiles=[[t.model_copy() for t in row] for row in data.tiles],
            start=data.start,
            end=data.end,
        )
