import time

from grid_snake.actions import Direction
from grid_snake.config import GameConfig
from grid_snake.input import KeyEvent
from grid_snake.levels.initial import INITIAL_SNAKE
from grid_snake.score_store import MemoryScoreStore
from grid_snake.session import GameSession, TickLoop
from grid_snake.step import tick
from tests.test_utils import make_snake_state


def _collision_session(store: MemoryScoreStore, high_score: int) -> GameSession:
    """Session one tick away from a self-collision with a score of 1."""
    state = make_snake_state(
        snake=[(1, 4), (1, 5), (1, 6), (2, 6), (2, 5)],
        directions=[Direction.UP],
        high_score=high_score,
    )
    return GameSession(state, store)


def test_create_loads_high_score_once() -> None:
    store = MemoryScoreStore(score=8)
    session = GameSession.create(GameConfig(rows=10, cols=20, seed=1), store)
    assert session.state.high_score == 8
    assert session.state.snake == INITIAL_SNAKE
    assert store.saves == 0


def test_new_high_score_is_saved() -> None:
    store = MemoryScoreStore(score=0)
    session = _collision_session(store, high_score=0)
    state = session.tick()
    assert state.snake == INITIAL_SNAKE
    assert store.score == 1
    assert store.saves == 1


def test_lower_score_is_not_saved() -> None:
    store = MemoryScoreStore(score=5)
    session = _collision_session(store, high_score=5)
    state = session.tick()
    assert state.runs == 1
    assert state.high_score == 5
    assert store.saves == 0


def test_high_score_monotonic_across_runs() -> None:
    store = MemoryScoreStore(score=0)
    _collision_session(store, high_score=0).tick()
    assert (store.score, store.saves) == (1, 1)
    # Tying the best score does not write again.
    _collision_session(store, high_score=store.load()).tick()
    assert (store.score, store.saves) == (1, 1)
    # A longer snake (score 2) raises it.
    longer = make_snake_state(
        snake=[(1, 3), (1, 4), (1, 5), (1, 6), (2, 6), (2, 5)],
        directions=[Direction.UP],
        high_score=store.load(),
    )
    state = GameSession(longer, store).tick()
    assert state.last_score == 2
    assert (store.score, store.saves) == (2, 2)


def test_enqueue_and_handle_key() -> None:
    store = MemoryScoreStore()
    session = GameSession(make_snake_state(directions=[Direction.RIGHT]), store)
    assert not session.enqueue(Direction.LEFT)
    assert session.handle_key(KeyEvent("ArrowDown"))
    assert not session.handle_key(KeyEvent("ArrowUp"))  # reverses queued DOWN
    assert not session.handle_key(KeyEvent("ArrowLeft", ctrl=True))
    assert not session.handle_key(KeyEvent("q"))
    assert list(session.snapshot().directions) == [Direction.RIGHT, Direction.DOWN]


def test_session_tick_matches_reducer() -> None:
    state = make_snake_state()
    session = GameSession(state, MemoryScoreStore())
    assert session.tick() == tick(state)


def test_tick_loop_drives_session() -> None:
    session = GameSession(make_snake_state(directions=[Direction.RIGHT]), MemoryScoreStore())
    with TickLoop(session, interval_ms=5) as loop:
        assert loop.running
        deadline = time.monotonic() + 2.0
        while session.snapshot().turn < 3 and time.monotonic() < deadline:
            time.sleep(0.005)
    assert not loop.running
    turn = session.snapshot().turn
    assert turn >= 3
    time.sleep(0.02)
    assert session.snapshot().turn == turn


def test_high_score_saved_while_session_is_locked() -> None:
    class LockCheckingStore(MemoryScoreStore):
        def save(self, score: int) -> None:
            assert session._lock.locked()
            super().save(score)

    store = LockCheckingStore(score=0)
    session = _collision_session(store, high_score=0)
    session.tick()
    assert (store.score, store.saves) == (1, 1)
