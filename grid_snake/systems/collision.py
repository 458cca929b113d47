"""Self-collision system.

Runs right after movement. If the new head landed on any other segment the
run ends inside the same tick: the final score is folded into
``high_score``, and the board goes back to its initial layout with the queue
set to ``[STOP]`` so the next run waits for input.
"""

from grid_snake.levels.initial import reset_state
from grid_snake.state import State


def has_self_collision(state: State) -> bool:
    """Return True if the head shares a cell with another segment."""
    return state.head in frozenset(state.snake[:-1])


def collision_system(state: State) -> State:
    """Reset the board when the snake ran into itself.

    Returns:
        State: Unchanged state if there is no collision, otherwise a freshly
            reset state carrying the updated ``high_score``, ``runs`` and
            ``last_score``.
    """
    if not has_self_collision(state):
        return state
    return reset_state(state)
