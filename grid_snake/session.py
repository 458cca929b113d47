"""Game session and tick scheduling.

:class:`GameSession` owns the live :class:`State` and is the only place the
pure reducers meet I/O: it loads the high score once, swaps in a new state
per tick or key press, and saves the high score when a run beats it.

Ticks and key presses may come from different threads (a :class:`TickLoop`
and a UI callback), so every transition happens under one lock. Each
transition computes a complete new snapshot before swapping it in, so readers
never see a half-applied tick.
"""

import logging
import threading
from typing import Optional

from grid_snake.actions import Direction
from grid_snake.config import GameConfig
from grid_snake.input import KeyEvent, key_to_direction
from grid_snake.levels.initial import build_initial_state
from grid_snake.score_store import ScoreStore
from grid_snake.state import State
from grid_snake.step import tick
from grid_snake.systems.direction import enqueue_direction

logger = logging.getLogger(__name__)


class GameSession:
    """Mutable holder for the current game state.

    Args:
        state: Starting state.
        store: Where new high scores are written.
    """

    def __init__(self, state: State, store: ScoreStore) -> None:
        self._state = state
        self._store = store
        self._lock = threading.Lock()

    @classmethod
    def create(cls, config: GameConfig, store: ScoreStore) -> "GameSession":
        """Load the stored high score and build the initial board."""
        high_score = store.load()
        state = build_initial_state(
            rows=config.rows,
            cols=config.cols,
            move_fn=config.move_fn,
            high_score=high_score,
            seed=config.seed,
        )
        return cls(state, store)

    @property
    def state(self) -> State:
        return self._state

    def snapshot(self) -> State:
        with self._lock:
            return self._state

    def tick(self) -> State:
        """Advance one tick and persist a beaten high score."""
        with self._lock:
            previous = self._state
            current = self._state = tick(previous)
            # Saved under the lock so concurrent ticks write in order.
            if current.high_score > previous.high_score:
                logger.info("New high score: %d", current.high_score)
                self._store.save(current.high_score)
        return current

    def enqueue(self, direction: Direction) -> bool:
        """Queue a command. Returns False if it was rejected as a reversal."""
        with self._lock:
            previous = self._state
            self._state = enqueue_direction(previous, direction)
            accepted = self._state is not previous
        if not accepted:
            logger.debug(
                "Rejected %s after queued %s", direction, previous.directions[-1]
            )
        return accepted

    def handle_key(self, event: KeyEvent) -> bool:
        """Queue the command bound to a key event, if any."""
        direction = key_to_direction(event)
        if direction is None:
            return False
        return self.enqueue(direction)


class TickLoop:
    """Background thread calling :meth:`GameSession.tick` at a fixed period.

    Args:
        session: Session to drive.
        interval_ms: Milliseconds between ticks.
    """

    def __init__(self, session: GameSession, interval_ms: int) -> None:
        self.session = session
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.info("Tick loop started (%.3fs interval)", self.interval)

    def stop(self) -> None:
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            logger.info("Tick loop stopped")

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.session.tick()

    def __enter__(self) -> "TickLoop":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
