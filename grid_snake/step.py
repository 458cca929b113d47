"""Tick reducer and system orchestration.

This module wires the systems together to implement a single *tick*. The
exported :func:`tick` is the only gameplay progression entry point and is
pure: it returns a *new* :class:`grid_snake.state.State`.

Ordering:

1. Short-circuit on a frozen (``lost``) state.
2. A STOP at the front of the queue holds the snake; only the queue advances.
3. ``movement_system`` drops the tail and appends the new head.
4. ``collision_system`` ends the run if the head hit the body. A reset
   already installs a fresh ``[STOP]`` queue, so the queue is not advanced.
5. ``food_system`` grows the snake and respawns food.
6. ``direction_queue_system`` consumes the front command.
"""

from dataclasses import replace
from grid_snake.actions import Direction
from grid_snake.state import State
from grid_snake.systems.collision import collision_system
from grid_snake.systems.direction import direction_queue_system
from grid_snake.systems.food import food_system
from grid_snake.systems.movement import movement_system


def tick(state: State) -> State:
    """Advance the game by one tick.

    Args:
        state (State): Previous immutable game state.

    Returns:
        State: Next state snapshot. A ``lost`` state is returned unchanged.
    """
    if state.lost:
        return state

    direction = state.current_direction
    if direction == Direction.STOP:
        return _after_tick(direction_queue_system(state))

    runs = state.runs
    state = movement_system(state, direction)
    state = collision_system(state)
    if state.runs == runs:
        state = food_system(state, direction)
    if state.runs == runs:
        state = direction_queue_system(state)
    return _after_tick(state)


def _after_tick(state: State) -> State:
    return replace(state, turn=state.turn + 1)
