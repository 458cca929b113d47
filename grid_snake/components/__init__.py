"""grid_snake.components
=======================

Value objects shared by the engine. Components are frozen dataclasses with no
behavior; systems build new instances instead of mutating them::

    from grid_snake.components import Position
"""

from .position import Position

__all__ = ["Position"]
