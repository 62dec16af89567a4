"""Grid math helpers.

Pure predicates and walks over a :data:`fracture_grid.state.Board`. The
neighbour walk always follows ``NEIGHBOR_PRIORITY`` (up, left, right, down)
and full-board scans are row-major; every ordering rule in the engine is
built from these two.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from pyrsistent import pmap

from fracture_grid.actions import DIRECTION_DELTAS, NEIGHBOR_PRIORITY, Direction
from fracture_grid.components import Coord, Tile
from fracture_grid.config import BOARD_SIZE
from fracture_grid.state import Board


def is_in_bounds(coord: Coord) -> bool:
    """Return True if ``coord`` lies on the board."""
    return 0 <= coord.row < BOARD_SIZE and 0 <= coord.col < BOARD_SIZE


def step_coord(coord: Coord, direction: Direction) -> Coord:
    """Coordinate one cell away in ``direction`` (no bounds check)."""
    d_row, d_col = DIRECTION_DELTAS[direction]
    return Coord(coord.row + d_row, coord.col + d_col)


def neighbors(coord: Coord) -> List[Coord]:
    """In-bounds neighbours of ``coord`` in priority order."""
    result: List[Coord] = []
    for direction in NEIGHBOR_PRIORITY:
        neighbor = step_coord(coord, direction)
        if is_in_bounds(neighbor):
            result.append(neighbor)
    return result


def all_coords() -> Iterator[Coord]:
    """Every board coordinate in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Coord(row, col)


def empty_coords(board: Board) -> List[Coord]:
    """Empty cells in row-major order."""
    return [coord for coord in all_coords() if coord not in board]


def empty_neighbors(board: Board, coord: Coord) -> List[Coord]:
    """Empty in-bounds neighbours of ``coord`` in priority order."""
    return [neighbor for neighbor in neighbors(coord) if neighbor not in board]


def adjacent_pairs(board: Board) -> Iterator[Tuple[Coord, Tile, Coord, Tile]]:
    """Yield each occupied horizontal/vertical pair exactly once.

    Tiles are visited row-major; for each one the right neighbour is yielded
    before the down neighbour.
    """
    for coord in all_coords():
        tile = board.get(coord)
        if tile is None:
            continue
        for other in (Coord(coord.row, coord.col + 1), Coord(coord.row + 1, coord.col)):
            other_tile = board.get(other)
            if other_tile is not None:
                yield coord, tile, other, other_tile


def board_to_rows(board: Board) -> List[List[Optional[Tile]]]:
    """Dense ``BOARD_SIZE`` x ``BOARD_SIZE`` view with ``None`` for empty cells."""
    return [
        [board.get(Coord(row, col)) for col in range(BOARD_SIZE)]
        for row in range(BOARD_SIZE)
    ]


def board_from_rows(rows: Sequence[Sequence[Optional[Tile]]]) -> Board:
    """Inverse of :func:`board_to_rows`.

    Raises:
        ValueError: If ``rows`` is not ``BOARD_SIZE`` x ``BOARD_SIZE``.
    """
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"Board rows must be {BOARD_SIZE}x{BOARD_SIZE}")
    cells = {}
    for row_index, row in enumerate(rows):
        for col_index, tile in enumerate(row):
            if tile is not None:
                cells[Coord(row_index, col_index)] = tile
    return pmap(cells)
