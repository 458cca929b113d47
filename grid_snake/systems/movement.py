"""Snake movement system.

Advances the body one cell: the tail leaves and a new head enters at the
cell returned by ``state.move_fn``. Collision and growth are resolved by the
systems that run afterwards.
"""

from dataclasses import replace
from grid_snake.actions import Direction
from grid_snake.state import State


def movement_system(state: State, direction: Direction) -> State:
    """Shift the snake one cell in ``direction``.

    Args:
        state (State): Current state.
        direction (Direction): A movement direction (not STOP).

    Returns:
        State: New state whose snake has the same length, tail removed and the
            new head appended.
    """
    new_head = state.move_fn(state, state.head, direction)
    return replace(state, snake=state.snake[1:].append(new_head))
