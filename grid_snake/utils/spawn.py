"""Food placement helpers.

Food lands on a cell drawn uniformly from the vacant cells of the board. The
reducer passes an explicit ``random.Random`` so that seeded states replay the
same food sequence.
"""

import random
from typing import Iterable, Optional
from grid_snake.components import Position
from grid_snake.state import State
from grid_snake.utils.grid import vacant_cells


def spawn_food(
    segments: Iterable[Position], rows: int, cols: int, rng: random.Random
) -> Optional[Position]:
    """Pick a uniformly random cell not covered by ``segments``.

    Returns:
        Optional[Position]: The chosen cell, or ``None`` when the snake fills
            the whole board.
    """
    vacant = vacant_cells(segments, rows, cols)
    if not vacant:
        return None
    return rng.choice(vacant)


def state_rng(state: State) -> random.Random:
    """RNG for the tick being processed.

    Seeded states derive the generator from ``(seed, turn)`` so every tick
    draws from its own reproducible stream; unseeded states use a fresh
    system-seeded generator.
    """
    if state.seed is None:
        return random.Random()
    return random.Random(hash((state.seed, state.turn)))
