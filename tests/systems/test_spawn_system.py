from fracture_grid.components import Coord, Tile
from fracture_grid.events import SpawnEvent
from fracture_grid.systems.spawn import spawn_system
from tests.test_utils import checkerboard_placements, make_state


def test_spawn_on_empty_board() -> None:
    state = make_state([], rng_state=1)
    new_state, event = spawn_system(state)
    # value draw ~0.236 -> 1; cell draw ~0.369 * 25 -> index 9 -> (1, 4)
    assert event == SpawnEvent(Coord(1, 4), "t1", 1)
    assert new_state.board[Coord(1, 4)] == Tile("t1", 1)
    assert new_state.rng_state == 1586005467
    assert new_state.next_tile_id == 2


def test_spawn_into_last_empty_cell() -> None:
    state = make_state(checkerboard_placements(skip=[Coord(0, 0)]), rng_state=1)
    new_state, event = spawn_system(state)
    assert event == SpawnEvent(Coord(0, 0), "t26", 1)
    assert len(new_state.board) == 25


def test_full_board_skips_spawn_and_rng() -> None:
    state = make_state(checkerboard_placements(), rng_state=1)
    new_state, event = spawn_system(state)
    assert event is None
    assert new_state is state
    assert new_state.rng_state == 1
