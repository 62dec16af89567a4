import pytest

from fracture_grid.actions import Direction
from fracture_grid.input import SWIPE_THRESHOLD, direction_from_drag, direction_from_key


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Direction.UP),
        ("ArrowDown", Direction.DOWN),
        ("ArrowLeft", Direction.LEFT),
        ("ArrowRight", Direction.RIGHT),
        ("d", Direction.RIGHT),
        ("Enter", None),
    ],
)
def test_direction_from_key(key: str, expected: Direction) -> None:
    assert direction_from_key(key) == expected


@pytest.mark.parametrize(
    "dx, dy, expected",
    [
        (5, 3, None),
        (SWIPE_THRESHOLD, 0, Direction.RIGHT),
        (-30, 10, Direction.LEFT),
        (10, 40, Direction.DOWN),
        (-5, -40, Direction.UP),
        (30, 30, Direction.RIGHT),
        (-30, 30, Direction.LEFT),
    ],
)
def test_direction_from_drag(dx: float, dy: float, expected: Direction) -> None:
    assert direction_from_drag(dx, dy) == expected


def test_direction_from_drag_custom_threshold() -> None:
    assert direction_from_drag(5, 0, threshold=4) == Direction.RIGHT
