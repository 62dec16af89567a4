"""Rule constants.

Every rule parameter of the puzzle lives here as a plain module constant so
systems can import exactly what they need. Per-game configuration is limited
to the RNG seed, which is passed to :func:`fracture_grid.game.create_game`.
"""

from typing import Tuple

BOARD_SIZE = 5
"""Side length of the square board."""

MAX_VALUE = 5
"""Highest value a placed tile can hold; merges above it overflow."""

MAX_STRAIN = 3
"""Strain cap. A tile at the cap fractures during the same move."""

STRAIN_GAP = 3
"""Minimum value difference between neighbours that produces strain."""

SPAWN_WEIGHTS: Tuple[float, ...] = (0.5, 0.35, 0.15)
SPAWN_VALUES: Tuple[int, ...] = (1, 2, 3)

DEFAULT_SEED = 1
