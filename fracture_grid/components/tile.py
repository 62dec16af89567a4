"""Tile component.

A tile is a numbered piece with a unique identity and a strain counter.
Identity is separate from value: a merge destroys two ids and mints a new
one, a fracture destroys one id and mints one or two.
"""

from dataclasses import dataclass

from fracture_grid.types import TileID


@dataclass(frozen=True)
class Tile:
    """Numbered tile.

    Attributes:
        id: Unique id, never reused within a game.
        value: Tile value (``>= 1``).
        strain: Accumulated strain in ``[0, MAX_STRAIN]``.
    """

    id: TileID
    value: int
    strain: int = 0
