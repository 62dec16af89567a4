"""Common type aliases and enumerations."""

from enum import StrEnum, auto

TileID = str
"""Opaque tile identity, rendered as ``t<n>`` by :mod:`fracture_grid.ids`."""


class EventType(StrEnum):
    """Discriminator carried by every engine event (see :mod:`fracture_grid.events`)."""

    MOVE = auto()
    BLOCKED = auto()
    MERGE = auto()
    STRAIN = auto()
    FRACTURE = auto()
    SPAWN = auto()
    END = auto()
