from typing import List, Set, Tuple

import pytest

from fracture_grid.components import Coord, Tile
from fracture_grid.config import MAX_STRAIN, MAX_VALUE
from fracture_grid.events import (
    BlockedEvent,
    EngineEvent,
    FractureEvent,
    MergeEvent,
    SpawnEvent,
)
from fracture_grid.game import create_game
from fracture_grid.moves import get_legal_moves
from fracture_grid.state import State
from fracture_grid.step import apply_move
from fracture_grid.utils.validation import is_valid_state


def play(state: State, turns: int) -> Tuple[State, List[EngineEvent]]:
    """Deterministic self-play: cycle through the legal moves by turn number."""
    events: List[EngineEvent] = []
    for _ in range(turns):
        legal = get_legal_moves(state)
        if not legal:
            break
        result = apply_move(state, legal[(state.turn * 7) % len(legal)])
        state = result.state
        events.extend(result.events)
    return state, events


def minted_ids(events: List[EngineEvent]) -> List[str]:
    ids: List[str] = []
    for event in events:
        if isinstance(event, MergeEvent):
            ids.append(event.new_id)
        elif isinstance(event, FractureEvent):
            ids.extend(spawn.tile_id for spawn in event.spawns)
        elif isinstance(event, SpawnEvent):
            ids.append(event.tile_id)
    return ids


def test_create_game_places_two_tiles() -> None:
    state = create_game(1)
    assert dict(state.board) == {
        Coord(1, 4): Tile("t1", 1),
        Coord(3, 2): Tile("t2", 2),
    }
    assert state.turn == 0
    assert state.game_over is False
    assert state.next_tile_id == 3
    assert state.rng_state == 3027450565


def test_create_game_default_seed() -> None:
    assert create_game() == create_game(1)


@pytest.mark.parametrize("seed", [0, 2, 99, 2**32 - 1])
def test_create_game_always_two_tiles(seed: int) -> None:
    state = create_game(seed)
    assert len(state.board) == 2
    assert {tile.id for tile in state.board.values()} == {"t1", "t2"}
    assert all(tile.value in (1, 2, 3) for tile in state.board.values())


@pytest.mark.parametrize("seed", [1, 7, 1234])
def test_replay_is_deterministic(seed: int) -> None:
    state_a, events_a = play(create_game(seed), 60)
    state_b, events_b = play(create_game(seed), 60)
    assert state_a == state_b
    assert events_a == events_b


def test_same_state_same_move_same_result() -> None:
    state, _ = play(create_game(11), 10)
    move = get_legal_moves(state)[0]
    assert apply_move(state, move) == apply_move(state, move)


@pytest.mark.parametrize("seed", [1, 5, 31337])
def test_long_play_invariants(seed: int) -> None:
    state = create_game(seed)
    seen: Set[str] = {tile.id for tile in state.board.values()}
    for _ in range(300):
        legal = get_legal_moves(state)
        if not legal:
            break
        before = state
        result = apply_move(state, legal[(state.turn * 7) % len(legal)])
        state = result.state

        assert state.turn == before.turn + 1
        assert not isinstance(result.events[0], BlockedEvent)
        assert is_valid_state(state)
        for tile in state.board.values():
            assert 1 <= tile.value <= MAX_VALUE
            assert 0 <= tile.strain <= MAX_STRAIN

        new_ids = minted_ids(list(result.events))
        assert len(new_ids) == len(set(new_ids))
        assert seen.isdisjoint(new_ids)
        seen.update(new_ids)
