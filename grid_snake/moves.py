"""Built-in movement functions.

Each *move function* maps (state, position, direction) -> the ``Position``
a segment at ``position`` reaches after one step in ``direction``. The
reducer calls it for the new head and, when the snake grows, once more for
the cell beyond the new head. Keeping this behind ``State.move_fn`` lets a
board swap topology without touching the systems.

Contract (``MoveFn``):

* Must return a position inside the grid.
* Should not mutate ``State``.
* Raises ``ValueError`` for ``Direction.STOP`` (STOP has no delta).
"""

from typing import Dict, Tuple
from grid_snake.actions import Direction
from grid_snake.components import Position
from grid_snake.state import State
from grid_snake.types import MoveFn
from grid_snake.utils.grid import wrap_position

_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def direction_delta(direction: Direction) -> Tuple[int, int]:
    """Return the ``(d_row, d_col)`` step for a movement direction."""
    if direction not in _DELTAS:
        raise ValueError(f"Direction has no movement delta: {direction}")
    return _DELTAS[direction]


def wrap_around_move_fn(
    state: State, pos: Position, direction: Direction
) -> Position:
    """Cardinal step with toroidal wrapping.

    Moving off an edge re-enters on the opposite side of the same row or
    column.
    """
    d_row, d_col = direction_delta(direction)
    return wrap_position(pos.row + d_row, pos.col + d_col, state.rows, state.cols)


# Move function registry for configuration by name
MOVE_FN_REGISTRY: Dict[str, MoveFn] = {
    "wrap": wrap_around_move_fn,
}
"""Registry of built-in movement function names to callables."""
