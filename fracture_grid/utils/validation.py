"""Structural invariant checks for caller-built states.

The engine itself only ever produces valid states; these helpers guard the
boundary where a state arrives from outside (fixtures, environment hooks,
deserialized snapshots).
"""

from typing import Optional, Set

from fracture_grid.config import MAX_STRAIN
from fracture_grid.ids import tile_id_number
from fracture_grid.state import State
from fracture_grid.types import TileID
from fracture_grid.utils.grid import is_in_bounds


def state_violation(state: State) -> Optional[str]:
    """Describe the first broken invariant, or ``None`` if ``state`` is valid."""
    if state.turn < 0:
        return f"negative turn {state.turn}"
    seen: Set[TileID] = set()
    for coord, tile in sorted(state.board.items(), key=lambda item: item[0]):
        if not is_in_bounds(coord):
            return f"tile {tile.id} out of bounds at {coord}"
        if tile.id in seen:
            return f"duplicate tile id {tile.id}"
        seen.add(tile.id)
        if tile.value < 1:
            return f"tile {tile.id} has value {tile.value}"
        if not 0 <= tile.strain <= MAX_STRAIN:
            return f"tile {tile.id} has strain {tile.strain}"
        number = tile_id_number(tile.id)
        if number is not None and number >= state.next_tile_id:
            return f"tile {tile.id} not below next_tile_id {state.next_tile_id}"
    return None


def is_valid_state(state: State) -> bool:
    """Return True if every structural invariant holds."""
    return state_violation(state) is None


def require_valid_state(state: State) -> State:
    """Return ``state`` unchanged or raise.

    Raises:
        ValueError: Naming the first broken invariant.
    """
    violation = state_violation(state)
    if violation is not None:
        raise ValueError(f"Invalid state: {violation}")
    return state
