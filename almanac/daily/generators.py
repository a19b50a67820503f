"""
Procedural level generators.

All generators draw from a SeededRandom so the same seed always yields the
same level. Generated levels are always solvable:

- pipe grids are built from a random spanning tree over every cell, so the
  unscrambled grid connects everything with no open ends;
- Shikaku boards are built from a random partition of the grid into
  rectangles, with one clue per rectangle.
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from ..puzzles.grid import in_bounds, iter_cells
from ..puzzles.models import (
    ClueData,
    Direction,
    GridPosition,
    PipeLevel,
    ShikakuLevel,
    TileData,
    TileKind,
)
from .rng import SeededRandom

logger = logging.getLogger(__name__)

_KIND_BY_DEGREE = {1: TileKind.DEAD_END, 3: TileKind.T_JUNCTION, 4: TileKind.CROSS}


def tile_for_connections(connections: FrozenSet[Direction]) -> Tuple[TileKind, int]:
    """
    Find the tile kind and rotation exposing exactly the given directions.

    Raises:
        ValueError: If no tile exposes that set (e.g. the empty set)
    """
    if len(connections) == 2:
        a, b = tuple(connections)
        kind = TileKind.STRAIGHT if a.opposite() is b else TileKind.CORNER
    elif len(connections) in _KIND_BY_DEGREE:
        kind = _KIND_BY_DEGREE[len(connections)]
    else:
        raise ValueError(f"No tile exposes {sorted(d.value for d in connections)}")

    for rotation in range(4):
        if kind.connections(rotation) == connections:
            return kind, rotation
    raise ValueError(f"No rotation of {kind.value} exposes {sorted(d.value for d in connections)}")


def _spanning_tree(
    rows: int, cols: int, root: GridPosition, rng: SeededRandom
) -> Dict[GridPosition, Set[Direction]]:
    """Randomized depth-first spanning tree; returns the open directions of each cell."""
    links: Dict[GridPosition, Set[Direction]] = {cell: set() for cell in iter_cells(rows, cols)}
    visited = {root}
    stack = [root]

    while stack:
        current = stack[-1]
        candidates = [
            d for d in Direction
            if in_bounds(current.adjacent(d), rows, cols) and current.adjacent(d) not in visited
        ]
        if not candidates:
            stack.pop()
            continue
        direction = rng.choice(candidates)
        neighbour = current.adjacent(direction)
        links[current].add(direction)
        links[neighbour].add(direction.opposite())
        visited.add(neighbour)
        stack.append(neighbour)

    return links


def generate_pipe_level(
    level_id: str,
    rows: int,
    cols: int,
    rng: SeededRandom,
    start: Optional[GridPosition] = None,
    end: Optional[GridPosition] = None,
    scramble: bool = True,
) -> PipeLevel:
    """
    Generate a solvable pipe level.

    Args:
        level_id: Identifier for the generated level
        rows: Number of rows (rows * cols must be at least 2)
        cols: Number of columns
        rng: Seeded generator to draw from
        start: Source cell, defaults to the grid centre; its tile is locked
        end: Target cell, defaults to the top-left corner
        scramble: Whether to randomize the rotation of unlocked tiles

    Returns:
        A PipeLevel listing every cell
    """
    if rows * cols < 2:
        raise ValueError("A pipe grid needs at least two cells")

    start = start if start is not None else GridPosition(rows // 2, cols // 2)
    end = end if end is not None else GridPosition(0, 0)

    links = _spanning_tree(rows, cols, start, rng)

    tiles: List[TileData] = []
    for cell in iter_cells(rows, cols):
        kind, rotation = tile_for_connections(frozenset(links[cell]))
        locked = cell == start
        if scramble and not locked:
            rotation = rng.next_int(0, 4)
        tiles.append(TileData(row=cell.row, col=cell.col, kind=kind, rotation=rotation, locked=locked))

    logger.debug("Generated pipe level %s (%dx%d)", level_id, rows, cols)
    return PipeLevel(
        id=level_id,
        grid_rows=rows,
        grid_cols=cols,
        start_row=start.row,
        start_col=start.col,
        end_row=end.row,
        end_col=end.col,
        tiles=tiles,
    )


def _fits(
    covered: Set[GridPosition], top: GridPosition, height: int, width: int, rows: int, cols: int
) -> bool:
    if top.row + height > rows or top.col + width > cols:
        return False
    return all(
        GridPosition(top.row + dr, top.col + dc) not in covered
        for dr in range(height)
        for dc in range(width)
    )


def generate_shikaku_level(
    level_id: str,
    rows: int,
    cols: int,
    rng: SeededRandom,
    max_area: int = 6,
) -> ShikakuLevel:
    """
    Generate a solvable Shikaku level by partitioning the grid.

    Rectangles are grown from the first uncovered cell in row-major order,
    preferring shapes larger than a single cell. Each rectangle gets one clue
    at a random cell with its area as value.
    """
    covered: Set[GridPosition] = set()
    clues: List[ClueData] = []

    for cell in iter_cells(rows, cols):
        if cell in covered:
            continue

        shapes = [
            (h, w)
            for h in range(1, rows - cell.row + 1)
            for w in range(1, cols - cell.col + 1)
            if h * w <= max_area and _fits(covered, cell, h, w, rows, cols)
        ]
        larger = [s for s in shapes if s[0] * s[1] > 1]
        height, width = rng.choice(larger or shapes)

        for dr in range(height):
            for dc in range(width):
                covered.add(GridPosition(cell.row + dr, cell.col + dc))

        clue_row = cell.row + rng.next_int(0, height)
        clue_col = cell.col + rng.next_int(0, width)
        clues.append(ClueData(row=clue_row, col=clue_col, value=height * width))

    logger.debug("Generated Shikaku level %s (%dx%d, %d clues)", level_id, rows, cols, len(clues))
    return ShikakuLevel(id=level_id, grid_rows=rows, grid_cols=cols, clues=clues)
