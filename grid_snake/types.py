"""Common type aliases.

``MoveFn`` is the extension point stored in ``State`` that decides where a
snake segment lands when it advances one cell.
"""

from typing import Callable, TYPE_CHECKING


# Forward declaration for MoveFn typing to avoid circular imports:
if TYPE_CHECKING:
    from grid_snake.state import State
    from grid_snake.actions import Direction
    from grid_snake.components import Position

MoveFn = Callable[["State", "Position", "Direction"], "Position"]
