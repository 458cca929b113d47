"""Keyboard input mapping.

Translates key events into queued :class:`Direction` commands. Key names
follow the browser ``KeyboardEvent.key`` convention (``"ArrowUp"``, ``" "``).
Any event with a modifier held is ignored so that browser and OS shortcuts
never steer the snake.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from grid_snake.actions import Direction


@dataclass(frozen=True)
class KeyEvent:
    key: str
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.shift or self.ctrl or self.alt or self.meta


KEY_MAP: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "s": Direction.STOP,
    "S": Direction.STOP,
    " ": Direction.STOP,
}


def key_to_direction(event: KeyEvent) -> Optional[Direction]:
    """Return the command bound to ``event``, or ``None`` if it is ignored."""
    if event.has_modifier:
        return None
    return KEY_MAP.get(event.key)
