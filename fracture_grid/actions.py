"""Direction and move value objects.

:class:`Direction` is the string enum used by callers (its values are the
tokens ``"up"``, ``"down"``, ``"left"`` and ``"right"``). ``NEIGHBOR_PRIORITY``
is the canonical order for every neighbour walk in the engine: merge partner
search, fracture placement, legal-move enumeration.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Tuple

from fracture_grid.components import Coord


class Direction(StrEnum):
    """String enum of slide directions.

    ``Direction("up")`` coerces a raw token; unknown tokens raise ``ValueError``.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
"""``(d_row, d_col)`` unit step per direction."""

NEIGHBOR_PRIORITY = [Direction.UP, Direction.LEFT, Direction.RIGHT, Direction.DOWN]


@dataclass(frozen=True)
class Move:
    """A single player command: slide the tile at ``source`` one cell.

    Attributes:
        source: Cell holding the tile to slide.
        direction: Slide direction. Raw string tokens are coerced.
    """

    source: Coord
    direction: Direction

    def __post_init__(self) -> None:
        if not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction(self.direction))
