from typing import List

import pytest

from fracture_grid.actions import NEIGHBOR_PRIORITY, Direction, Move
from fracture_grid.components import Coord
from fracture_grid.events import BlockedEvent
from fracture_grid.game import create_game
from fracture_grid.moves import destination, get_legal_moves
from fracture_grid.state import State
from fracture_grid.step import apply_move
from fracture_grid.utils.grid import all_coords
from tests.test_utils import make_state, place


def test_destination_has_no_bounds_check() -> None:
    assert destination(Coord(0, 0), Direction.UP) == Coord(-1, 0)
    assert destination(Coord(4, 4), Direction.RIGHT) == Coord(4, 5)


def test_single_corner_tile() -> None:
    state = make_state([place(0, 0, "t1", 2)])
    assert get_legal_moves(state) == [
        Move(Coord(0, 0), Direction.RIGHT),
        Move(Coord(0, 0), Direction.DOWN),
    ]


def test_moves_ordered_row_major_then_priority() -> None:
    state = make_state([place(2, 2, "t1", 1), place(1, 2, "t2", 3)])
    assert get_legal_moves(state) == [
        Move(Coord(1, 2), Direction.UP),
        Move(Coord(1, 2), Direction.LEFT),
        Move(Coord(1, 2), Direction.RIGHT),
        Move(Coord(2, 2), Direction.LEFT),
        Move(Coord(2, 2), Direction.RIGHT),
        Move(Coord(2, 2), Direction.DOWN),
    ]


def test_no_moves_when_game_over() -> None:
    state = make_state([place(0, 0, "t1", 2)], game_over=True)
    assert get_legal_moves(state) == []


def _all_moves() -> List[Move]:
    return [Move(coord, direction) for coord in all_coords() for direction in NEIGHBOR_PRIORITY]


def _played(state: State, count: int) -> State:
    for _ in range(count):
        legal = get_legal_moves(state)
        if not legal:
            break
        state = apply_move(state, legal[state.turn % len(legal)]).state
    return state


@pytest.mark.parametrize("seed, turns", [(1, 0), (3, 6), (42, 15)])
def test_legal_moves_match_unblocked_moves(seed: int, turns: int) -> None:
    state = _played(create_game(seed), turns)
    legal = set(get_legal_moves(state))
    for move in _all_moves():
        first = apply_move(state, move).events[0]
        assert (move in legal) is not isinstance(first, BlockedEvent)
