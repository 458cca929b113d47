"""Grid math helpers.

Pure predicates and enumerations over the ROWS x COLS board. Cells are always
enumerated in row-major order so that random choices over them are
reproducible for a given seed.
"""

from typing import FrozenSet, Iterable, List
from grid_snake.components import Position


def wrap_position(row: int, col: int, rows: int, cols: int) -> Position:
    """Toroidal wrap for coordinates (used by wrap movement)."""
    return Position(row % rows, col % cols)


def all_cells(rows: int, cols: int) -> List[Position]:
    return [Position(row, col) for row in range(rows) for col in range(cols)]


def occupied_cells(segments: Iterable[Position]) -> FrozenSet[Position]:
    return frozenset(segments)


def vacant_cells(
    segments: Iterable[Position], rows: int, cols: int
) -> List[Position]:
    """Return every cell not covered by ``segments``, row-major."""
    occupied = occupied_cells(segments)
    return [cell for cell in all_cells(rows, cols) if cell not in occupied]
