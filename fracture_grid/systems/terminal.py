"""Terminal condition system.

The game ends when no tile can slide (no occupied cell has an empty
neighbour) and no merge is pending (no two adjacent tiles share a value).
``game_over`` is set exactly once; the reducer short-circuits afterwards.
"""

from dataclasses import replace
from typing import List, Tuple

from fracture_grid.events import EndEvent, EngineEvent
from fracture_grid.state import Board, State
from fracture_grid.utils.grid import adjacent_pairs, empty_neighbors


def has_slide(board: Board) -> bool:
    """Return True if any tile has an empty in-bounds neighbour."""
    return any(empty_neighbors(board, coord) for coord in board.keys())


def has_merge(board: Board) -> bool:
    """Return True if two adjacent tiles share a value."""
    return any(tile.value == other.value for _, tile, _, other in adjacent_pairs(board))


def terminal_system(state: State) -> Tuple[State, List[EngineEvent]]:
    """Set ``game_over`` and emit ``EndEvent`` when no play remains."""
    if state.game_over or has_slide(state.board) or has_merge(state.board):
        return state, []
    return replace(state, game_over=True), [EndEvent()]
