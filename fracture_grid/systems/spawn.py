"""End-of-turn spawn system.

Places one fresh strain-free tile in a random empty cell. The value is drawn
first (``SPAWN_WEIGHTS`` over ``SPAWN_VALUES``), then the cell (uniform over
the row-major empty list). A full board skips both draws, leaving
``rng_state`` untouched.
"""

from dataclasses import replace
from typing import Optional, Tuple

from fracture_grid.components import Tile
from fracture_grid.config import SPAWN_VALUES, SPAWN_WEIGHTS
from fracture_grid.events import SpawnEvent
from fracture_grid.ids import new_tile_id
from fracture_grid.state import State
from fracture_grid.utils.grid import empty_coords
from fracture_grid.utils.rng import random_int, weighted_index


def spawn_system(state: State) -> Tuple[State, Optional[SpawnEvent]]:
    """Spawn one tile, or return ``(state, None)`` when the board is full."""
    empties = empty_coords(state.board)
    if not empties:
        return state, None

    rng_state, value_index = weighted_index(state.rng_state, SPAWN_WEIGHTS)
    value = SPAWN_VALUES[value_index]
    rng_state, cell_index = random_int(rng_state, len(empties))
    at = empties[cell_index]

    tile_id, next_tile_id = new_tile_id(state.next_tile_id)
    state = replace(
        state,
        board=state.board.set(at, Tile(tile_id, value)),
        rng_state=rng_state,
        next_tile_id=next_tile_id,
    )
    return state, SpawnEvent(at, tile_id, value)
