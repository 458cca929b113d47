"""Initial board layout and run reset.

Every run starts from the same four-segment snake along the top row, heading
right, with food in the middle of the board. :func:`reset_state` is used by
the collision systems to end a run in place.
"""

from dataclasses import replace
from typing import Optional
from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_snake.actions import Direction
from grid_snake.components import Position
from grid_snake.moves import wrap_around_move_fn
from grid_snake.state import INITIAL_LENGTH, State
from grid_snake.types import MoveFn
from grid_snake.utils.spawn import spawn_food, state_rng

DEFAULT_ROWS = 10
DEFAULT_COLS = 20

INITIAL_SNAKE: PVector[Position] = pvector(
    [Position(0, col) for col in range(INITIAL_LENGTH)]
)


def build_initial_state(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    move_fn: MoveFn = wrap_around_move_fn,
    high_score: int = 0,
    seed: Optional[int] = None,
) -> State:
    """Create the state a session starts from.

    Args:
        rows (int): Board height.
        cols (int): Board width; must fit the initial snake.
        move_fn (MoveFn): Movement rule for the board.
        high_score (int): Best score loaded from the score store.
        seed (int | None): Seed for reproducible food placement.

    Returns:
        State: Snake on the top row heading right, food centered.

    Raises:
        ValueError: If the board cannot hold the initial snake.
    """
    if rows < 1 or cols < INITIAL_LENGTH:
        raise ValueError(
            f"Board {rows}x{cols} cannot hold the initial snake of length {INITIAL_LENGTH}"
        )
    state = State(
        rows=rows,
        cols=cols,
        move_fn=move_fn,
        snake=INITIAL_SNAKE,
        directions=pvector([Direction.RIGHT]),
        high_score=high_score,
        seed=seed,
    )
    food: Optional[Position] = Position(rows // 2, cols // 2)
    if food in state.occupancy:
        food = spawn_food(INITIAL_SNAKE, rows, cols, state_rng(state))
    return replace(state, food=food)


def reset_state(state: State) -> State:
    """End the current run and put the board back to its initial layout.

    The final score is the length of the snake at the moment of the collision
    minus the initial length. The queue is reset to ``[STOP]`` so the new run
    waits for a direction.
    """
    final_score = state.score
    return replace(
        state,
        snake=INITIAL_SNAKE,
        directions=pvector([Direction.STOP]),
        food=spawn_food(INITIAL_SNAKE, state.rows, state.cols, state_rng(state)),
        lost=False,
        high_score=max(state.high_score, final_score),
        runs=state.runs + 1,
        last_score=final_score,
    )
