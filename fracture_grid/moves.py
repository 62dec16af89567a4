"""Legal-move enumeration.

A move is playable when its destination is on the board and empty; merges
are never a move on their own, they only happen as a consequence of a
slide. :func:`get_legal_moves` therefore lists exactly the moves for which
:func:`fracture_grid.step.apply_move` would not emit a ``BlockedEvent``.
"""

from typing import List

from fracture_grid.actions import NEIGHBOR_PRIORITY, Direction, Move
from fracture_grid.components import Coord
from fracture_grid.state import State
from fracture_grid.utils.grid import all_coords, is_in_bounds, step_coord


def destination(coord: Coord, direction: Direction) -> Coord:
    """Cell one step from ``coord`` in ``direction``; may be off the board."""
    return step_coord(coord, direction)


def get_legal_moves(state: State) -> List[Move]:
    """Every playable move, row-major by source then up/left/right/down.

    Returns an empty list once the game is over.
    """
    if state.game_over:
        return []

    moves: List[Move] = []
    for coord in all_coords():
        if coord not in state.board:
            continue
        for direction in NEIGHBOR_PRIORITY:
            target = destination(coord, direction)
            if is_in_bounds(target) and target not in state.board:
                moves.append(Move(coord, direction))
    return moves
