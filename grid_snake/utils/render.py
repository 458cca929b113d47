"""Render contract helpers.

Renderers only read state. These helpers flatten a :class:`State` into
the per-cell view a front-end needs: whether the snake covers a cell and
whether the food is on it.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List

import numpy as np

from grid_snake.state import State
from grid_snake.utils.grid import all_cells


class CellKind(IntEnum):
    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


@dataclass(frozen=True)
class CellView:
    row: int
    col: int
    active: bool
    has_food: bool


def cell_snapshot(state: State) -> List[CellView]:
    """Return one :class:`CellView` per cell, row-major."""
    occupied = state.occupancy
    return [
        CellView(
            row=cell.row,
            col=cell.col,
            active=cell in occupied,
            has_food=cell == state.food,
        )
        for cell in all_cells(state.rows, state.cols)
    ]


def occupancy_grid(state: State) -> np.ndarray:
    """Return a ``(rows, cols)`` ``uint8`` array of :class:`CellKind` codes."""
    grid = np.zeros((state.rows, state.cols), dtype=np.uint8)
    if state.food is not None:
        grid[state.food.row, state.food.col] = CellKind.FOOD
    for segment in state.snake:
        grid[segment.row, segment.col] = CellKind.BODY
    if state.snake:
        grid[state.head.row, state.head.col] = CellKind.HEAD
    return grid
