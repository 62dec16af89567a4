"""Gymnasium environment wrapper for the fracture puzzle.

Exposes the engine through the standard ``reset`` / ``step`` API so training
and evaluation harnesses can drive it. Observations are two integer planes
(tile values and strain, ``0`` for empty cells). Reward is the sum of merge
values produced by the step; blocked moves earn nothing and leave the state
unchanged. ``terminated`` mirrors ``state.game_over``; the puzzle has no
forced episode end, so ``truncated`` is always ``False``.

Actions are flat indices over ``(row, col, direction)``::

    index = (row * BOARD_SIZE + col) * 4 + NEIGHBOR_PRIORITY.index(direction)

``info["action_mask"]`` marks the indices that :func:`get_legal_moves`
reports as playable.

Usage:

``env = FractureGridEnv(seed=7)``
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np

from fracture_grid.actions import NEIGHBOR_PRIORITY, Move
from fracture_grid.components import Coord
from fracture_grid.config import BOARD_SIZE, DEFAULT_SEED, MAX_STRAIN, MAX_VALUE
from fracture_grid.events import MergeEvent, event_to_dict
from fracture_grid.game import create_game
from fracture_grid.moves import get_legal_moves
from fracture_grid.state import State
from fracture_grid.step import apply_move
from fracture_grid.utils.rng import next_rng
from fracture_grid.utils.validation import require_valid_state

logger = logging.getLogger(__name__)

ObsType = Dict[str, np.ndarray]

ACTION_COUNT = BOARD_SIZE * BOARD_SIZE * len(NEIGHBOR_PRIORITY)


def encode_action(move: Move) -> int:
    """Flat action index for ``move``."""
    cell = move.source.row * BOARD_SIZE + move.source.col
    return cell * len(NEIGHBOR_PRIORITY) + NEIGHBOR_PRIORITY.index(move.direction)


def decode_action(action: int) -> Move:
    """Inverse of :func:`encode_action`.

    Raises:
        ValueError: If ``action`` is outside ``[0, ACTION_COUNT)``.
    """
    if not 0 <= action < ACTION_COUNT:
        raise ValueError(f"Invalid action: {action}")
    cell, direction_index = divmod(int(action), len(NEIGHBOR_PRIORITY))
    row, col = divmod(cell, BOARD_SIZE)
    return Move(Coord(row, col), NEIGHBOR_PRIORITY[direction_index])


def action_mask(state: State) -> np.ndarray:
    """``int8`` vector with ``1`` at every legal action index."""
    mask = np.zeros(ACTION_COUNT, dtype=np.int8)
    for move in get_legal_moves(state):
        mask[encode_action(move)] = 1
    return mask


def board_observation(state: State) -> ObsType:
    """Value and strain planes for ``state``."""
    values = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int64)
    strain = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int64)
    for coord, tile in state.board.items():
        values[coord.row, coord.col] = tile.value
        strain[coord.row, coord.col] = tile.strain
    return {"value": values, "strain": strain}


class FractureGridEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the fracture puzzle.

    Each ``reset`` without an explicit seed advances the episode seed through
    the engine's generator, so a sequence of episodes is reproducible from the
    constructor seed alone.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(
        self,
        seed: Optional[int] = None,
        initial_state_fn: Optional[Callable[[int], State]] = None,
    ):
        """Create a new environment instance.

        Arguments:
            seed: Seed of the first episode (``DEFAULT_SEED`` when omitted).
            initial_state_fn: Callable mapping a seed to a starting ``State``.
                Defaults to :func:`fracture_grid.game.create_game`. Returned
                states are validated.
        """
        from gymnasium import spaces

        self._initial_state_fn = initial_state_fn or create_game
        self._episode_seed = DEFAULT_SEED if seed is None else seed
        self.state: Optional[State] = None

        self.observation_space = spaces.Dict(
            {
                "value": spaces.Box(
                    low=0, high=MAX_VALUE, shape=(BOARD_SIZE, BOARD_SIZE), dtype=np.int64
                ),
                "strain": spaces.Box(
                    low=0, high=MAX_STRAIN, shape=(BOARD_SIZE, BOARD_SIZE), dtype=np.int64
                ),
            }
        )
        self.action_space = spaces.Discrete(ACTION_COUNT)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the episode seed for this and following episodes.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and info dict (``turn``, ``events``, ``action_mask``).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._episode_seed = seed
        episode_seed = self._episode_seed
        self._episode_seed, _ = next_rng(self._episode_seed)

        self.state = require_valid_state(self._initial_state_fn(episode_seed))
        logger.debug("Reset episode with seed %d", episode_seed)
        return board_observation(self.state), self._get_info([])

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one move.

        Arguments:
            action: Flat action index (see :func:`encode_action`).

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None, "Call reset() before step()"

        result = apply_move(self.state, decode_action(int(action)))
        self.state = result.state
        reward = float(
            sum(event.value for event in result.events if isinstance(event, MergeEvent))
        )
        info = self._get_info([event_to_dict(event) for event in result.events])
        return board_observation(self.state), reward, self.state.game_over, False, info

    def _get_info(self, events: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Step info: turn counter, serialized events and legal-action mask."""
        assert self.state is not None
        return {
            "turn": self.state.turn,
            "events": events,
            "action_mask": action_mask(self.state),
        }
