import pytest
from typing import Optional

from grid_snake.actions import Direction
from grid_snake.input import KeyEvent, key_to_direction


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Direction.UP),
        ("ArrowDown", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT),
        ("s", Direction.STOP),
        ("S", Direction.STOP),
        (" ", Direction.STOP),
        ("Enter", None),
        ("x", None),
    ],
)
def test_key_mapping(key: str, expected: Optional[Direction]) -> None:
    assert key_to_direction(KeyEvent(key)) == expected


@pytest.mark.parametrize("modifier", ["shift", "ctrl", "alt", "meta"])
def test_modifier_combinations_are_ignored(modifier: str) -> None:
    event = KeyEvent("ArrowUp", **{modifier: True})
    assert event.has_modifier
    assert key_to_direction(event) is None
