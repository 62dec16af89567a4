"""Game factory.

:func:`create_game` builds the pre-spawn state and runs the spawn phase
twice, threading the generator state and id counter, so a new game always
opens with two tiles (``t1`` and ``t2``).
"""

import logging
from typing import Optional

from fracture_grid.state import State, create_initial_state
from fracture_grid.systems.spawn import spawn_system

logger = logging.getLogger(__name__)

OPENING_SPAWNS = 2


def create_game(seed: Optional[int] = None) -> State:
    """Return a fresh game seeded with ``seed`` (``DEFAULT_SEED`` when omitted)."""
    state = create_initial_state(seed)
    for _ in range(OPENING_SPAWNS):
        state, _ = spawn_system(state)
    logger.debug("Created game with seed %s: %d tiles", seed, len(state.board))
    return state
