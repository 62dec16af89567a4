"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole game at a single turn. The reducer in :mod:`fracture_grid.step` takes
a previous ``State`` plus a :class:`fracture_grid.actions.Move` and returns a
*new* ``State``; nothing is mutated in-place, so a state handed back to the
caller stays valid for replay and comparison.

Design notes:

* The board is a **persistent map** (``pyrsistent.PMap``) keyed by
    :class:`Coord`. Absence of a key means the cell is empty.
* ``rng_state`` and ``next_tile_id`` are plain counters threaded through
    every phase; there is no hidden generator.
* ``game_over`` is the only terminal marker. The reducer short-circuits on
    terminal states.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from fracture_grid.components import Coord, Tile
from fracture_grid.config import DEFAULT_SEED

Board = PMap[Coord, Tile]


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        board (PMap[Coord, Tile]): Occupied cells. Tile ids are unique.
        turn (int): Number of non-blocked moves applied (0-based).
        game_over (bool): True once neither a slide nor a merge is possible.
        rng_state (int): Current generator state (see :mod:`fracture_grid.utils.rng`).
        next_tile_id (int): Counter for the next minted tile id.
    """

    board: Board = pmap()
    turn: int = 0
    game_over: bool = False
    rng_state: int = DEFAULT_SEED
    next_tile_id: int = 1

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Skips an empty board and falsy scalars so diagnostics stay short.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if field == "board":
                if len(value) == 0:
                    continue
            elif not value:
                continue
            description = description.set(field, value)
        return description


def create_empty_board() -> Board:
    """Return a board with every cell empty."""
    return pmap()


def clone_board(board: Board) -> Board:
    """Return an independent copy of ``board``.

    Tiles are frozen and every edit of a ``PMap`` yields a new map, so the
    copy can share structure with the original without either observing
    changes to the other.
    """
    return pmap(board)


def clone_state(state: State) -> State:
    """Return an independent copy of ``state``."""
    return replace(state, board=clone_board(state.board))


def create_initial_state(seed: Optional[int] = None) -> State:
    """Build the pre-spawn state: empty board, turn 0, id counter at 1."""
    return State(
        board=create_empty_board(),
        turn=0,
        game_over=False,
        rng_state=DEFAULT_SEED if seed is None else seed,
        next_tile_id=1,
    )
