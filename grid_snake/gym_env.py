"""Gymnasium environment wrapper for the snake game.

Each ``step`` queues the chosen command and advances one tick, so an agent
sees exactly what a player pressing one key per tick would see. Reward is the
delta of ``state.score`` per step, with ``-1`` when the snake runs into
itself. ``terminated`` is ``True`` on the step that ends a run; the engine has
already reset the board by then, and callers should ``reset()`` as usual.

Observation schema:

``{"grid": np.ndarray(rows, cols) of CellKind codes, "info": {"score", "high_score", "turn", "runs"}}``

Usage:

``env = SnakeEnv(rows=10, cols=20, seed=0)``
"""

import gymnasium as gym
import numpy as np
from typing import Optional, Dict, Tuple, Any

from PIL.Image import Image as PILImage

from grid_snake.actions import Direction, GymAction
from grid_snake.levels.initial import DEFAULT_COLS, DEFAULT_ROWS, build_initial_state
from grid_snake.moves import wrap_around_move_fn
from grid_snake.renderer.texture import DEFAULT_CELL_SIZE, TextureRenderer
from grid_snake.state import State
from grid_snake.step import tick
from grid_snake.systems.direction import enqueue_direction
from grid_snake.types import MoveFn
from grid_snake.utils.render import CellKind, occupancy_grid

ObsType = Dict[str, Any]

COLLISION_REWARD = -1.0


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (scores and counters)."""
    return {
        "score": int(state.score),
        "high_score": int(state.high_score),
        "turn": int(state.turn),
        "runs": int(state.runs),
    }


class SnakeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the snake board.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_snake.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        seed: Optional[int] = None,
        move_fn: MoveFn = wrap_around_move_fn,
        render_mode: str = "texture",
        render_cell_size: int = DEFAULT_CELL_SIZE,
    ):
        """Create a new environment instance.

        Arguments:
            rows: Board height.
            cols: Board width.
            seed: Seed for food placement; ``reset(seed=...)`` overrides it.
            move_fn: Movement rule for the board.
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_cell_size: Pixel size of one cell in rendered frames.
        """
        from gymnasium import spaces

        self.rows = rows
        self.cols = cols
        self._seed = seed
        self._move_fn = move_fn
        self._render_mode = render_mode
        self._renderer = TextureRenderer(cell_size=render_cell_size)
        self.high_score = 0
        self.state: Optional[State] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=int(CellKind.FOOD),
                    shape=(rows, cols),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "score": int_box(0, rows * cols),
                        "high_score": int_box(0, rows * cols),
                        "turn": int_box(0, 1_000_000_000),
                        "runs": int_box(0, 1_000_000_000),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode from the initial board.

        The best score reached so far carries over between episodes.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
        if self.state is not None:
            self.high_score = max(self.high_score, self.state.high_score)
        self.state = build_initial_state(
            rows=self.rows,
            cols=self.cols,
            move_fn=self._move_fn,
            high_score=self.high_score,
            seed=self._seed,
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Queue ``action`` and advance one tick.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        direction = Direction[GymAction(int(action)).name]

        prev = self.state
        self.state = tick(enqueue_direction(prev, direction))
        terminated = self.state.runs > prev.runs
        if terminated:
            reward = COLLISION_REWARD
        else:
            reward = float(self.state.score - prev.score)
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "grid": occupancy_grid(self.state),
            "info": {
                key: np.array(value, dtype=np.int64)
                for key, value in env_status_observation_dict(self.state).items()
            },
        }

    def _get_info(self) -> Dict[str, object]:
        assert self.state is not None
        return {"last_score": self.state.last_score}
