"""Direction queue system.

The queue is a FIFO of commands: input appends to the back, each tick
consumes the front. The sole remaining entry is never dropped, so it keeps
acting as the current direction until something else is queued.

Reversal rejection compares against the *most recently queued* command
rather than the one currently being executed, which lets a player queue
several quick turns (e.g. UP then LEFT while moving RIGHT) without the
second one being mistaken for a reversal of the first.
"""

from dataclasses import replace
from grid_snake.actions import Direction, is_reverse
from grid_snake.state import State


def enqueue_direction(state: State, direction: Direction) -> State:
    """Append a command to the queue.

    Args:
        state (State): Current state.
        direction (Direction): Requested command.

    Returns:
        State: Same state if the command reverses the last queued direction,
            otherwise a state with ``direction`` appended.
    """
    if direction != Direction.STOP and is_reverse(state.directions[-1], direction):
        return state
    return replace(state, directions=state.directions.append(direction))


def direction_queue_system(state: State) -> State:
    """Drop the consumed front entry unless it is the only one left."""
    if len(state.directions) <= 1:
        return state
    return replace(state, directions=state.directions[1:])
