from grid_snake.actions import Direction
from grid_snake.levels.initial import INITIAL_SNAKE
from grid_snake.systems.collision import collision_system, has_self_collision
from tests.test_utils import make_snake_state


def test_no_collision_leaves_state_untouched() -> None:
    state = make_snake_state()
    assert not has_self_collision(state)
    assert collision_system(state) is state


def test_collision_resets_board() -> None:
    # Head (1, 1) lands on an existing segment.
    state = make_snake_state(
        snake=[(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)],
        directions=[Direction.UP, Direction.RIGHT],
        high_score=0,
    )
    assert has_self_collision(state)
    reset = collision_system(state)
    assert reset.snake == INITIAL_SNAKE
    assert list(reset.directions) == [Direction.STOP]
    assert reset.high_score == 1
    assert reset.last_score == 1
    assert reset.runs == 1
    assert reset.food not in reset.occupancy
