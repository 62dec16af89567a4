"""Direction mapping for input adapters.

Keyboard and pointer adapters live outside the engine; they only need to
turn a raw gesture into one :class:`Direction` before calling
:func:`fracture_grid.step.apply_move`. These helpers hold that mapping so
every adapter agrees on it.
"""

from typing import Dict, Optional

from fracture_grid.actions import Direction

SWIPE_THRESHOLD = 24
"""Minimum drag distance (in pointer units) on either axis before a swipe counts."""

KEY_DIRECTIONS: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_from_key(key: str) -> Optional[Direction]:
    """Direction bound to ``key``, or ``None`` for unbound keys."""
    return KEY_DIRECTIONS.get(key)


def direction_from_drag(
    dx: float, dy: float, threshold: float = SWIPE_THRESHOLD
) -> Optional[Direction]:
    """Resolve a pointer drag into a direction.

    Returns ``None`` while the drag is shorter than ``threshold`` on both axes.
    Otherwise the dominant axis wins (ties go horizontal) and the sign picks
    the direction. Screen coordinates grow downward.
    """
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    if abs(dx) >= abs(dy):
        return Direction.RIGHT if dx >= 0 else Direction.LEFT
    return Direction.DOWN if dy >= 0 else Direction.UP
