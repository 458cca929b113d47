from grid_snake.actions import Direction
from grid_snake.systems.movement import movement_system
from tests.test_utils import cells, make_snake_state


def test_tail_leaves_head_enters() -> None:
    state = make_snake_state(snake=[(0, 0), (0, 1), (0, 2), (0, 3)])
    moved = movement_system(state, Direction.RIGHT)
    assert cells(moved) == [(0, 1), (0, 2), (0, 3), (0, 4)]


def test_turn_down() -> None:
    state = make_snake_state(snake=[(0, 0), (0, 1), (0, 2), (0, 3)])
    moved = movement_system(state, Direction.DOWN)
    assert cells(moved) == [(0, 1), (0, 2), (0, 3), (1, 3)]


def test_head_wraps_across_edge() -> None:
    state = make_snake_state(snake=[(4, 16), (4, 17), (4, 18), (4, 19)])
    moved = movement_system(state, Direction.RIGHT)
    assert cells(moved) == [(4, 17), (4, 18), (4, 19), (4, 0)]


def test_movement_does_not_touch_queue_or_food() -> None:
    state = make_snake_state()
    moved = movement_system(state, Direction.RIGHT)
    assert moved.directions == state.directions
    assert moved.food == state.food
