"""Tile id allocation.

Ids are minted from the ``next_tile_id`` counter stored on
:class:`fracture_grid.state.State` rather than a process-wide generator, so
two games (or two replays of one game) never interfere.

Examples
--------
>>> from fracture_grid.ids import new_tile_id
>>> new_tile_id(1)
('t1', 2)

Ids are never recycled within a timeline. Two states branched from a common
ancestor mint the same ids independently.
"""

import re
from typing import List, Optional, Tuple

from fracture_grid.types import TileID

_TILE_ID_PATTERN = re.compile(r"^t(\d+)$")


def new_tile_id(next_tile_id: int) -> Tuple[TileID, int]:
    """Return a fresh id and the advanced counter."""
    return f"t{next_tile_id}", next_tile_id + 1


def new_tile_ids(next_tile_id: int, n: int) -> Tuple[List[TileID], int]:
    """Return ``n`` fresh ids and the advanced counter."""
    ids: List[TileID] = []
    for _ in range(n):
        tile_id, next_tile_id = new_tile_id(next_tile_id)
        ids.append(tile_id)
    return ids, next_tile_id


def tile_id_number(tile_id: TileID) -> Optional[int]:
    """Counter value encoded in ``tile_id`` or ``None`` for foreign ids."""
    match = _TILE_ID_PATTERN.match(tile_id)
    if match is None:
        return None
    return int(match.group(1))
