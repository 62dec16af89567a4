"""Coord component.

Immutable integer grid coordinates used as board keys. Ordering is
row-major, which is the order every queue in the engine is sorted by.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coord:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int
