"""fracture_grid.components
=================================

Aggregate import surface for the value objects stored on the board::

    from fracture_grid.components import Coord, Tile

Both are frozen dataclasses; systems express change by building new
instances (e.g. ``dataclasses.replace(tile, strain=tile.strain + 1)``).
"""

from .coord import Coord
from .tile import Tile

__all__ = [
    "Coord",
    "Tile",
]
