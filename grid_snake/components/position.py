"""Position component.

Immutable integer grid coordinates. Snake segments and the food cell are all
stored as ``Position`` values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int
