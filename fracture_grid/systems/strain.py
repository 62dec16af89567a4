"""Strain accrual and decay systems.

Accrual: every adjacent occupied pair whose values differ by at least
``STRAIN_GAP`` gives the higher tile one unit of strain intent. Intents are
summed per tile, then applied in ``(row, col)`` order clamped to
``MAX_STRAIN``. A ``StrainEvent`` is emitted only when strain actually rises.

Decay runs after fractures and lowers every tile's strain by one, floored at
zero. It emits nothing.
"""

from dataclasses import replace
from typing import Dict, List, Tuple

from pyrsistent import pmap

from fracture_grid.components import Coord
from fracture_grid.config import MAX_STRAIN, STRAIN_GAP
from fracture_grid.events import EngineEvent, StrainEvent
from fracture_grid.state import State
from fracture_grid.types import TileID
from fracture_grid.utils.grid import adjacent_pairs


def strain_system(state: State) -> Tuple[State, List[EngineEvent]]:
    """Accrue strain on tiles that tower over a neighbour."""
    increments: Dict[TileID, Tuple[Coord, int]] = {}
    for coord, tile, other_coord, other in adjacent_pairs(state.board):
        if abs(tile.value - other.value) < STRAIN_GAP:
            continue
        higher_coord, higher = (coord, tile) if tile.value > other.value else (other_coord, other)
        at, amount = increments.get(higher.id, (higher_coord, 0))
        increments[higher.id] = (at, amount + 1)

    board = state.board
    events: List[EngineEvent] = []
    for at, amount in sorted(increments.values(), key=lambda entry: entry[0]):
        tile = board[at]
        new_strain = min(MAX_STRAIN, tile.strain + amount)
        if new_strain > tile.strain:
            board = board.set(at, replace(tile, strain=new_strain))
            events.append(StrainEvent(at, tile.id, new_strain))

    return replace(state, board=board), events


def strain_decay_system(state: State) -> State:
    """Lower every tile's strain by one (floor 0)."""
    board = pmap(
        {
            coord: replace(tile, strain=max(0, tile.strain - 1))
            for coord, tile in state.board.items()
        }
    )
    return replace(state, board=board)
