"""Food system.

When the head reaches the food cell the snake grows by one: one more cell is
appended beyond the new head in the direction of travel, which undoes the
tail removal of this tick. New food is then placed on a vacant cell of the
grown snake.
"""

from dataclasses import replace
from grid_snake.actions import Direction
from grid_snake.levels.initial import reset_state
from grid_snake.state import State
from grid_snake.utils.spawn import spawn_food, state_rng


def food_system(state: State, direction: Direction) -> State:
    """Grow the snake and respawn food if the head is on the food cell.

    Args:
        state (State): State after movement (and a collision check).
        direction (Direction): Direction of travel for this tick.

    Returns:
        State: Same state if the head is elsewhere, otherwise a state with a
            longer snake and new food.
    """
    if state.food is None or state.head != state.food:
        return state

    extension = state.move_fn(state, state.head, direction)
    if extension in state.occupancy:
        # Growing into its own body ends the run like any other collision.
        return reset_state(replace(state, snake=state.snake.append(extension)))

    grown = state.snake.append(extension)
    food = spawn_food(grown, state.rows, state.cols, state_rng(state))
    return replace(state, snake=grown, food=food)
