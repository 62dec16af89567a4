"""Engine event records.

Each observable sub-effect of a move is described by one immutable record.
The seven variants form the closed :data:`EngineEvent` union; each carries
its :class:`fracture_grid.types.EventType` in ``type`` so consumers can
dispatch on either the class or the tag.

Renderers and transports should go through :func:`event_to_dict`, which
handles every variant explicitly and refuses anything else.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from fracture_grid.actions import Direction
from fracture_grid.components import Coord, Tile
from fracture_grid.state import State
from fracture_grid.types import EventType, TileID
from fracture_grid.utils.grid import board_to_rows


@dataclass(frozen=True)
class MoveEvent:
    source: Coord
    target: Coord
    tile_id: TileID
    type: EventType = field(default=EventType.MOVE, init=False)


@dataclass(frozen=True)
class BlockedEvent:
    source: Coord
    direction: Direction
    type: EventType = field(default=EventType.BLOCKED, init=False)


@dataclass(frozen=True)
class MergeEvent:
    """Two equal tiles combined into ``new_id`` of ``value``.

    ``value`` may exceed ``MAX_VALUE``; in that case the new tile is never
    placed and a :class:`FractureEvent` for ``new_id`` follows.
    """

    at: Coord
    from_ids: Tuple[TileID, TileID]
    new_id: TileID
    value: int
    type: EventType = field(default=EventType.MERGE, init=False)


@dataclass(frozen=True)
class StrainEvent:
    at: Coord
    tile_id: TileID
    new_strain: int
    type: EventType = field(default=EventType.STRAIN, init=False)


@dataclass(frozen=True)
class SpawnedTile:
    """One product of a fracture."""

    at: Coord
    tile_id: TileID
    value: int


@dataclass(frozen=True)
class FractureEvent:
    at: Coord
    tile_id: TileID
    spawns: Tuple[SpawnedTile, ...]
    type: EventType = field(default=EventType.FRACTURE, init=False)


@dataclass(frozen=True)
class SpawnEvent:
    at: Coord
    tile_id: TileID
    value: int
    type: EventType = field(default=EventType.SPAWN, init=False)


@dataclass(frozen=True)
class EndEvent:
    type: EventType = field(default=EventType.END, init=False)


EngineEvent = Union[
    MoveEvent,
    BlockedEvent,
    MergeEvent,
    StrainEvent,
    FractureEvent,
    SpawnEvent,
    EndEvent,
]


def _coord_dict(coord: Coord) -> Dict[str, int]:
    return {"row": coord.row, "col": coord.col}


def event_to_dict(event: EngineEvent) -> Dict[str, Any]:
    """Serialize an event into a JSON-friendly dict.

    Raises:
        TypeError: If ``event`` is not one of the seven engine event types.
    """
    payload: Dict[str, Any]
    if isinstance(event, MoveEvent):
        payload = {
            "from": _coord_dict(event.source),
            "to": _coord_dict(event.target),
            "tileId": event.tile_id,
        }
    elif isinstance(event, BlockedEvent):
        payload = {"from": _coord_dict(event.source), "dir": str(event.direction)}
    elif isinstance(event, MergeEvent):
        payload = {
            "at": _coord_dict(event.at),
            "fromIds": list(event.from_ids),
            "newId": event.new_id,
            "value": event.value,
        }
    elif isinstance(event, StrainEvent):
        payload = {
            "at": _coord_dict(event.at),
            "tileId": event.tile_id,
            "newStrain": event.new_strain,
        }
    elif isinstance(event, FractureEvent):
        payload = {
            "at": _coord_dict(event.at),
            "tileId": event.tile_id,
            "spawns": [
                {"at": _coord_dict(s.at), "tileId": s.tile_id, "value": s.value}
                for s in event.spawns
            ],
        }
    elif isinstance(event, SpawnEvent):
        payload = {
            "at": _coord_dict(event.at),
            "tileId": event.tile_id,
            "value": event.value,
        }
    elif isinstance(event, EndEvent):
        payload = {}
    else:
        raise TypeError(f"Unknown engine event: {event!r}")
    return {"type": str(event.type), **payload}


def _tile_dict(tile: Optional[Tile]) -> Optional[Dict[str, Any]]:
    if tile is None:
        return None
    return {"id": tile.id, "value": tile.value, "strain": tile.strain}


def state_to_dict(state: State) -> Dict[str, Any]:
    """Serialize a state snapshot (board as dense rows) for renderers."""
    rows: List[List[Optional[Dict[str, Any]]]] = [
        [_tile_dict(tile) for tile in row] for row in board_to_rows(state.board)
    ]
    return {
        "turnCount": state.turn,
        "gameOver": state.game_over,
        "rngState": state.rng_state,
        "nextTileId": state.next_tile_id,
        "board": rows,
    }
