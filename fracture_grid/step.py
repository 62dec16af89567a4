"""Move reducer and phase orchestration.

This module wires the systems together in the order that defines a single
turn. The exported :func:`apply_move` is the only entry point for gameplay
progression and is pure: it returns a *new* :class:`fracture_grid.state.State`
together with the ordered events narrating the move.

Phase order:

1. ``validate_move``: blocked moves return the input state and one
    ``BlockedEvent``; the turn does not advance.
2. ``slide_system``: the tile moves one cell.
3. ``merge_system``: value-descending merge pass; overflows are queued.
4. ``strain_system``: strain accrual next to much smaller neighbours.
5. ``fracture_system``: overflow fractures, then capped-strain fractures.
6. ``strain_decay_system``: silent strain decay.
7. ``spawn_system``: one weighted random spawn if a cell is empty.
8. ``terminal_system``: sets ``game_over`` when no play remains.
9. Turn counter advances by one.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Tuple

from fracture_grid.actions import Move
from fracture_grid.events import BlockedEvent, EngineEvent
from fracture_grid.state import State
from fracture_grid.systems.fracture import fracture_system
from fracture_grid.systems.merge import merge_system
from fracture_grid.systems.movement import slide_system, validate_move
from fracture_grid.systems.spawn import spawn_system
from fracture_grid.systems.strain import strain_decay_system, strain_system
from fracture_grid.systems.terminal import terminal_system

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of :func:`apply_move`.

    Attributes:
        state (State): State after the move (the input object itself when the
            move was blocked or the game was already over).
        events (Tuple[EngineEvent, ...]): Ordered sub-effects of the move.
    """

    state: State
    events: Tuple[EngineEvent, ...]


def apply_move(state: State, move: Move) -> StepResult:
    """Resolve one player move.

    Args:
        state (State): Current state. Never modified.
        move (Move): Tile to slide and direction.

    Returns:
        StepResult: The next state and its events. A finished game yields the
            same state and no events; a blocked move yields the same state and
            a single ``BlockedEvent``.
    """
    if state.game_over:
        return StepResult(state, ())

    target = validate_move(state, move)
    if target is None:
        logger.debug("Blocked move %s %s at turn %d", move.source, move.direction, state.turn)
        return StepResult(state, (BlockedEvent(move.source, move.direction),))

    events: List[EngineEvent] = []

    state, slide_events = slide_system(state, move, target)
    events.extend(slide_events)

    state, merge_events, overflow = merge_system(state, target)
    events.extend(merge_events)

    state, strain_events = strain_system(state)
    events.extend(strain_events)

    state, fracture_events = fracture_system(state, overflow)
    events.extend(fracture_events)

    state = strain_decay_system(state)

    state, spawn_event = spawn_system(state)
    if spawn_event is not None:
        events.append(spawn_event)

    state, end_events = terminal_system(state)
    events.extend(end_events)

    state = replace(state, turn=state.turn + 1)

    logger.debug(
        "Turn %d: %s %s -> %d events%s",
        state.turn,
        move.source,
        move.direction,
        len(events),
        " (game over)" if state.game_over else "",
    )
    return StepResult(state, tuple(events))
