"""Grid helpers and plain-text rendering utilities."""

from typing import Dict, Iterator, List, Optional, Sequence

from .models import GridPosition, NumberClue, Rectangle, Tile


def in_bounds(position: GridPosition, rows: int, cols: int) -> bool:
    """Check whether a position lies on a rows x cols grid."""
    return 0 <= position.row < rows and 0 <= position.col < cols


def iter_cells(rows: int, cols: int) -> Iterator[GridPosition]:
    """Yield every cell of the grid in row-major order."""
    for row in range(rows):
        for col in range(cols):
            yield GridPosition(row, col)


def render_shikaku(
    rows: int,
    cols: int,
    clues: Sequence[NumberClue],
    rectangles: Sequence[Rectangle],
) -> str:
    """
    Render a Shikaku board to a string.

    Clue cells show their value, covered cells show the letter of their
    rectangle (a, b, c... in drawing order; '#' where rectangles overlap),
    uncovered cells show '.'.
    """
    clue_at: Dict[GridPosition, int] = {c.position: c.value for c in clues}
    lines: List[str] = []

    for row in range(rows):
        cells: List[str] = []
        for col in range(cols):
            position = GridPosition(row, col)
            if position in clue_at:
                cells.append(str(clue_at[position]))
                continue
            covering = [i for i, r in enumerate(rectangles) if r.contains(position)]
            if not covering:
                cells.append('.')
            elif len(covering) > 1:
                cells.append('#')
            else:
                cells.append(chr(ord('a') + covering[0] % 26))
        lines.append(' '.join(cells))

    return '\n'.join(lines)


def render_pipes(
    tiles: Sequence[Sequence[Tile]],
    start: Optional[GridPosition] = None,
    end: Optional[GridPosition] = None,
) -> str:
    """Render a pipe grid using box-drawing glyphs, marking start (S) and end (E)."""
    lines: List[str] = []

    for row, tile_row in enumerate(tiles):
        cells: List[str] = []
        for col, tile in enumerate(tile_row):
            position = GridPosition(row, col)
            marker = ' '
            if position == start:
                marker = 'S'
            elif position == end:
                marker = 'E'
            cells.append(tile.symbol + marker)
        lines.append(''.join(cells).rstrip())

    return '\n'.join(lines)
