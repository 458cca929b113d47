"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole game at a single tick. All systems are pure functions that take a
previous ``State`` (plus, for input, a ``Direction``) and return a *new*
``State``; nothing is mutated in place. Timers, key handlers and the score
store sit outside and only ever swap one snapshot for the next.

Design notes:

* The snake body and the direction queue are **persistent vectors**
    (``pyrsistent.PVector``). The body is ordered tail first, head last; the
    queue is consumed from the front.
* ``lost`` short-circuits the reducer. A self-collision resets the board in
    the same tick, so the flag is only ever observed as ``True`` when a caller
    sets it explicitly to freeze the game.
* ``high_score`` mirrors the persisted best score. The reducer raises it when
    a run ends; writing it back to storage is the session's job.

See :mod:`grid_snake.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional
from pyrsistent import PVector, pvector

from grid_snake.actions import Direction
from grid_snake.components import Position
from grid_snake.types import MoveFn

INITIAL_LENGTH = 4


@dataclass(frozen=True)
class State:
    """Immutable snake game state.

    Attributes:
        rows (int): Grid height in cells.
        cols (int): Grid width in cells.
        move_fn (MoveFn): Resolves the next cell for a segment moving in a direction.
        snake (PVector[Position]): Body segments, tail first and head last.
        directions (PVector[Direction]): Pending commands; never empty.
        food (Position | None): Food cell, ``None`` only when the board is full.
        lost (bool): Freezes the reducer when True.
        high_score (int): Best score seen so far (loaded from the score store).
        turn (int): Number of processed ticks.
        runs (int): Number of runs ended by a self-collision.
        last_score (int | None): Final score of the most recent run.
        seed (int | None): Base RNG seed for deterministic food placement.
    """

    # Level
    rows: int
    cols: int
    move_fn: "MoveFn"

    # Board
    snake: PVector[Position] = pvector()
    directions: PVector[Direction] = pvector([Direction.STOP])
    food: Optional[Position] = None

    # Status
    lost: bool = False
    high_score: int = 0
    turn: int = 0
    runs: int = 0
    last_score: Optional[int] = None

    # RNG
    seed: Optional[int] = None

    @property
    def head(self) -> Position:
        return self.snake[-1]

    @property
    def score(self) -> int:
        """Food eaten in the current run (length above the initial snake)."""
        return len(self.snake) - INITIAL_LENGTH

    @property
    def current_direction(self) -> Direction:
        return self.directions[0]

    @property
    def occupancy(self) -> FrozenSet[Position]:
        """Set of cells covered by the snake."""
        return frozenset(self.snake)
