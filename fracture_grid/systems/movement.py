"""Move validation and slide system.

A move is legal only when the source cell is on the board and occupied and
the destination one step away is on the board and empty. Malformed
coordinates are treated exactly like any other illegal move.
"""

from dataclasses import replace
from typing import List, Optional, Tuple

from fracture_grid.actions import Move
from fracture_grid.components import Coord
from fracture_grid.events import EngineEvent, MoveEvent
from fracture_grid.state import State
from fracture_grid.utils.grid import is_in_bounds, step_coord


def validate_move(state: State, move: Move) -> Optional[Coord]:
    """Return the slide destination, or ``None`` if the move is blocked."""
    if not is_in_bounds(move.source) or move.source not in state.board:
        return None
    target = step_coord(move.source, move.direction)
    if not is_in_bounds(target) or target in state.board:
        return None
    return target


def slide_system(
    state: State, move: Move, target: Coord
) -> Tuple[State, List[EngineEvent]]:
    """Slide the tile at ``move.source`` onto ``target``.

    Assumes ``target`` came from :func:`validate_move`.
    """
    tile = state.board[move.source]
    board = state.board.remove(move.source).set(target, tile)
    return replace(state, board=board), [MoveEvent(move.source, target, tile.id)]
