import random

import pytest

from grid_snake.components import Position
from grid_snake.utils.grid import all_cells, vacant_cells, wrap_position
from grid_snake.utils.spawn import spawn_food, state_rng
from tests.test_utils import make_snake_state, positions


def test_all_cells_row_major() -> None:
    assert all_cells(2, 3) == positions(
        [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    )


def test_wrap_position() -> None:
    assert wrap_position(-1, 20, 10, 20) == Position(9, 0)
    assert wrap_position(10, -1, 10, 20) == Position(0, 19)


def test_vacant_cells_excludes_snake() -> None:
    snake = positions([(0, 0), (0, 1)])
    vacant = vacant_cells(snake, 2, 2)
    assert vacant == positions([(1, 0), (1, 1)])


def test_spawn_food_never_on_snake() -> None:
    rng = random.Random(1234)
    snake = positions([(r, c) for r in range(3) for c in range(4) if (r, c) != (2, 3)])
    snake_cells = set(snake)
    for _ in range(50):
        food = spawn_food(snake, 3, 4, rng)
        assert food is not None
        assert food not in snake_cells
    # Only one vacant cell left, so it must be chosen every time.
    assert spawn_food(snake, 3, 4, rng) == Position(2, 3)


def test_spawn_food_covers_every_vacant_cell() -> None:
    rng = random.Random(7)
    snake = positions([(0, 0), (0, 1), (0, 2), (0, 3)])
    seen = {spawn_food(snake, 2, 4, rng) for _ in range(400)}
    assert seen == set(positions([(1, 0), (1, 1), (1, 2), (1, 3)]))


def test_spawn_food_full_board_returns_none() -> None:
    snake = all_cells(2, 2)
    assert spawn_food(snake, 2, 2, random.Random(0)) is None


def test_state_rng_is_deterministic_for_seeded_states() -> None:
    state = make_snake_state(seed=42)
    assert state_rng(state).random() == state_rng(state).random()
