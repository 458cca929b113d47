"""Direction enumerations.

Defines the human readable :class:`Direction` (string enum) used by the
direction queue, the reversal check and the input mapping, plus a stable
integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_DIRECTIONS`` is the canonical ordered list of movement directions;
checks like ``if direction in MOVE_DIRECTIONS`` are preferred over comparing
against ``Direction.STOP`` by name.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict


class Direction(StrEnum):
    """String enum of queued snake commands.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        STOP: Hold the snake in place until another direction is consumed.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    STOP = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

OPPOSITE_DIRECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    STOP = auto()


def is_reverse(first: Direction, second: Direction) -> bool:
    """Return True if ``second`` points straight back along ``first``."""
    return OPPOSITE_DIRECTION.get(first) == second
