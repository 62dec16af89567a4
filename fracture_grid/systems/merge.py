"""Merge resolution system.

A single pass over tile values from ``MAX_VALUE`` down to 1. Within a value,
tiles are scanned row-major and each looks for an equal-value partner among
its neighbours in priority order (up, left, right, down). Tiles that merged,
and tiles minted by a merge, are ineligible for the rest of the pass. The
descending scan is what makes cascades reproducible: a 4+4 pair always
merges before a 2+2 pair on the same board.

The merged tile lands on the slide destination when it was one of the two
sources, otherwise on the scanning tile's cell. Results above ``MAX_VALUE``
are not placed; they are returned as overflow fractures instead.
"""

from dataclasses import replace
from typing import List, Optional, Set, Tuple

from fracture_grid.components import Coord, Tile
from fracture_grid.config import MAX_VALUE
from fracture_grid.events import EngineEvent, MergeEvent
from fracture_grid.ids import new_tile_id
from fracture_grid.state import Board, State
from fracture_grid.systems.fracture import PendingFracture
from fracture_grid.types import TileID
from fracture_grid.utils.grid import all_coords, neighbors


def find_merge_neighbor(
    board: Board, coord: Coord, value: int, merged_ids: Set[TileID]
) -> Optional[Coord]:
    """First neighbour of ``coord`` holding an unmerged tile of ``value``."""
    for neighbor in neighbors(coord):
        tile = board.get(neighbor)
        if tile is not None and tile.value == value and tile.id not in merged_ids:
            return neighbor
    return None


def merge_system(
    state: State, moved_to: Coord
) -> Tuple[State, List[EngineEvent], List[PendingFracture]]:
    """Resolve every merge triggered by the slide onto ``moved_to``.

    Returns:
        Tuple: The updated state, one ``MergeEvent`` per merged pair, and the
        overflow fractures in the order they were queued.
    """
    board = state.board
    next_tile_id = state.next_tile_id
    merged_ids: Set[TileID] = set()
    events: List[EngineEvent] = []
    overflow: List[PendingFracture] = []

    for value in range(MAX_VALUE, 0, -1):
        for coord in all_coords():
            tile = board.get(coord)
            if tile is None or tile.value != value or tile.id in merged_ids:
                continue
            partner_coord = find_merge_neighbor(board, coord, value, merged_ids)
            if partner_coord is None:
                continue
            partner = board[partner_coord]

            board = board.remove(coord).remove(partner_coord)
            merged_ids.update((tile.id, partner.id))

            new_id, next_tile_id = new_tile_id(next_tile_id)
            new_value = value + 1
            place = moved_to if moved_to in (coord, partner_coord) else coord
            events.append(MergeEvent(place, (tile.id, partner.id), new_id, new_value))

            if new_value > MAX_VALUE:
                overflow.append(PendingFracture(place, new_value, new_id))
            else:
                board = board.set(place, Tile(new_id, new_value))
                merged_ids.add(new_id)

    return replace(state, board=board, next_tile_id=next_tile_id), events, overflow
