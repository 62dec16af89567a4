import pytest

from fracture_grid.components import Coord, Tile
from fracture_grid.events import FractureEvent, SpawnedTile
from fracture_grid.systems.fracture import (
    PendingFracture,
    fracture_system,
    fracture_tile,
    strained_fractures,
)
from tests.test_utils import make_state, place


def test_two_empty_neighbours() -> None:
    state = make_state([place(2, 2, "t1", 4, 3)])
    new_state, events = fracture_system(state, [])
    assert events == [
        FractureEvent(
            Coord(2, 2),
            "t1",
            (SpawnedTile(Coord(1, 2), "t2", 3), SpawnedTile(Coord(2, 1), "t3", 3)),
        )
    ]
    assert dict(new_state.board) == {Coord(1, 2): Tile("t2", 3), Coord(2, 1): Tile("t3", 3)}
    assert new_state.next_tile_id == 4


def test_one_empty_neighbour() -> None:
    state = make_state(
        [
            place(2, 2, "t1", 4, 3),
            place(1, 2, "t2", 1),
            place(2, 1, "t3", 2),
            place(2, 3, "t4", 3),
        ]
    )
    new_state, events = fracture_system(state, [])
    assert events[0].spawns == (SpawnedTile(Coord(3, 2), "t5", 3),)
    assert Coord(2, 2) not in new_state.board


def test_no_empty_neighbour_reuses_own_cell() -> None:
    state = make_state(
        [
            place(2, 2, "t1", 4, 3),
            place(1, 2, "t2", 1),
            place(2, 1, "t3", 2),
            place(2, 3, "t4", 3),
            place(3, 2, "t5", 2),
        ]
    )
    new_state, events = fracture_system(state, [])
    assert events[0].spawns == (SpawnedTile(Coord(2, 2), "t6", 3),)
    assert new_state.board[Coord(2, 2)] == Tile("t6", 3)


def test_overflow_before_strain_regardless_of_position() -> None:
    state = make_state([place(0, 0, "t1", 4, 3)], next_tile_id=10)
    overflow = [PendingFracture(Coord(3, 3), 6, "t9")]
    new_state, events = fracture_system(state, overflow)
    assert [e.tile_id for e in events] == ["t9", "t1"]
    assert events[0].spawns == (
        SpawnedTile(Coord(2, 3), "t10", 5),
        SpawnedTile(Coord(3, 2), "t11", 5),
    )
    assert events[1].spawns == (
        SpawnedTile(Coord(0, 1), "t12", 3),
        SpawnedTile(Coord(1, 0), "t13", 3),
    )
    assert new_state.next_tile_id == 14


def test_overflow_queue_sorted_by_coord() -> None:
    state = make_state([], next_tile_id=20)
    overflow = [
        PendingFracture(Coord(2, 2), 6, "t8"),
        PendingFracture(Coord(0, 0), 6, "t9"),
    ]
    _, events = fracture_system(state, overflow)
    assert [e.at for e in events] == [Coord(0, 0), Coord(2, 2)]


def test_tile_removed_only_when_id_matches() -> None:
    state = make_state([place(1, 1, "t5", 2)], next_tile_id=10)
    board, next_tile_id, event = fracture_tile(
        state.board, state.next_tile_id, PendingFracture(Coord(1, 1), 6, "t9")
    )
    assert board[Coord(1, 1)] == Tile("t5", 2)
    assert [s.at for s in event.spawns] == [Coord(0, 1), Coord(1, 0)]
    assert next_tile_id == 12


def test_strained_fractures_row_major() -> None:
    state = make_state(
        [place(3, 0, "t1", 4, 3), place(0, 4, "t2", 5, 3), place(1, 1, "t3", 5, 2)]
    )
    assert strained_fractures(state.board) == [
        PendingFracture(Coord(0, 4), 5, "t2"),
        PendingFracture(Coord(3, 0), 4, "t1"),
    ]


def test_products_below_one_are_rejected() -> None:
    state = make_state([place(0, 0, "t1", 1, 3)])
    with pytest.raises(ValueError):
        fracture_system(state, [])
