"""Fracture resolution system.

Two queues are resolved, both ordered by ``(row, col)``:

1. Overflow fractures queued by the merge system (merge results above
    ``MAX_VALUE`` that were never placed). Equal coordinates keep their queue
    order.
2. Placed tiles whose strain reached ``MAX_STRAIN``, collected before any
    fracture in this phase runs.

Each fracture removes its tile (if the cell still holds that id) and spawns
``value - 1`` tiles into the first two empty neighbours in priority order,
the single empty neighbour, or the fracture's own cell when none is empty.
"""

from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from fracture_grid.components import Coord, Tile
from fracture_grid.config import MAX_STRAIN
from fracture_grid.events import EngineEvent, FractureEvent, SpawnedTile
from fracture_grid.ids import new_tile_id
from fracture_grid.state import Board, State
from fracture_grid.types import TileID
from fracture_grid.utils.grid import all_coords, empty_neighbors


@dataclass(frozen=True)
class PendingFracture:
    """A tile scheduled to fracture this phase."""

    at: Coord
    value: int
    tile_id: TileID


def strained_fractures(board: Board) -> List[PendingFracture]:
    """Tiles at the strain cap, row-major."""
    pending: List[PendingFracture] = []
    for coord in all_coords():
        tile = board.get(coord)
        if tile is not None and tile.strain >= MAX_STRAIN:
            pending.append(PendingFracture(coord, tile.value, tile.id))
    return pending


def fracture_tile(
    board: Board, next_tile_id: int, fracture: PendingFracture
) -> Tuple[Board, int, FractureEvent]:
    """Resolve a single fracture.

    Raises:
        ValueError: If the products would have a value below 1. The strain
            rule only strains tiles at least ``STRAIN_GAP`` above a neighbour,
            so this indicates a corrupted state.
    """
    product_value = fracture.value - 1
    if product_value < 1:
        raise ValueError(
            f"Fracture of {fracture.tile_id} at {fracture.at} would produce value {product_value}"
        )

    current = board.get(fracture.at)
    if current is not None and current.id == fracture.tile_id:
        board = board.remove(fracture.at)

    targets = empty_neighbors(board, fracture.at)[:2] or [fracture.at]

    spawns: List[SpawnedTile] = []
    for target in targets:
        tile_id, next_tile_id = new_tile_id(next_tile_id)
        board = board.set(target, Tile(tile_id, product_value))
        spawns.append(SpawnedTile(target, tile_id, product_value))

    return board, next_tile_id, FractureEvent(fracture.at, fracture.tile_id, tuple(spawns))


def fracture_system(
    state: State, overflow: Sequence[PendingFracture]
) -> Tuple[State, List[EngineEvent]]:
    """Resolve overflow fractures, then strain fractures.

    Arguments:
        state: State after strain accrual.
        overflow: Overflow fractures in the order the merge system queued them.

    Returns:
        Tuple[State, List[EngineEvent]]: Updated state and one ``FractureEvent``
        per fracture.
    """
    queue = sorted(overflow, key=lambda fracture: fracture.at)
    queue.extend(strained_fractures(state.board))

    board = state.board
    next_tile_id = state.next_tile_id
    events: List[EngineEvent] = []
    for fracture in queue:
        board, next_tile_id, event = fracture_tile(board, next_tile_id, fracture)
        events.append(event)

    return replace(state, board=board, next_tile_id=next_tile_id), events
