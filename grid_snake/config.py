"""Game configuration.

:class:`GameConfig` holds the board size, tick period and storage location.
Defaults reproduce the classic 10x20 board ticking every 80 ms. Values can be
overridden through ``GRID_SNAKE_*`` environment variables via
:func:`load_config`.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from grid_snake.moves import MOVE_FN_REGISTRY
from grid_snake.state import INITIAL_LENGTH
from grid_snake.types import MoveFn

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class GameConfig:
    rows: int = 10
    cols: int = 20
    tick_interval_ms: int = 80
    seed: Optional[int] = None
    move_fn_name: str = "wrap"
    highscore_path: str = "snake_highscore.json"

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be at least 1, got {self.rows}")
        if self.cols < INITIAL_LENGTH:
            raise ValueError(
                f"cols must be at least {INITIAL_LENGTH}, got {self.cols}"
            )
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )
        if self.move_fn_name not in MOVE_FN_REGISTRY:
            raise ValueError(f"Unknown move function: {self.move_fn_name}")

    @property
    def move_fn(self) -> MoveFn:
        return MOVE_FN_REGISTRY[self.move_fn_name]

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_interval_ms / 1000


def _env(name: str, parse: Callable[[str], T], default: T) -> T:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return parse(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def load_config() -> GameConfig:
    """Build a :class:`GameConfig` from ``GRID_SNAKE_*`` environment variables."""
    defaults = GameConfig()
    config = GameConfig(
        rows=_env("GRID_SNAKE_ROWS", int, defaults.rows),
        cols=_env("GRID_SNAKE_COLS", int, defaults.cols),
        tick_interval_ms=_env(
            "GRID_SNAKE_TICK_MS", int, defaults.tick_interval_ms
        ),
        seed=_env("GRID_SNAKE_SEED", int, defaults.seed),
        move_fn_name=_env("GRID_SNAKE_MOVE_FN", str, defaults.move_fn_name),
        highscore_path=_env(
            "GRID_SNAKE_HIGHSCORE_PATH", str, defaults.highscore_path
        ),
    )
    logger.debug("Loaded config: %s", config)
    return config
