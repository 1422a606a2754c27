"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ActionType(IntEnum):
    """Verbs an actor can perform on its turn."""

    RUN = 0
    MOVE = 1
    TURN = 2
    MELEE = 3
    USE = 4
    WAIT = 5


@unique
class Direction(IntEnum):
    """The six hex directions, numbered clockwise.

    Values double as rotation offsets: adding a Direction to a facing
    turns it clockwise by that many sixths.
    """

    NORTH = 0
    NORTH_EAST = 1
    SOUTH_EAST = 2
    SOUTH = 3
    SOUTH_WEST = 4
    NORTH_WEST = 5

    def __add__(self, other: int) -> Direction:
        return Direction((int(self) + int(other)) % 6)

    def __sub__(self, other: int) -> Direction:
        return Direction((int(self) - int(other)) % 6)

    @property
    def opposite(self) -> Direction:
        return self + 3


@unique
class Relative(IntEnum):
    """Movement markers relative to the actor's facing.

    Only meaningful for MOVE, RUN and MELEE. A TURN never takes one.
    """

    FORWARD = 0
    BACKWARD = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    AI_DECISION = 1
    SPAWN = 2
    MAP_GEN = 3


@unique
class Race(IntEnum):
    """Actor races. HUMAN is reserved for the player."""

    HUMAN = 0
    SCOUT = 1
    GRUNT = 2
    HEAVY = 3


@unique
class Terrain(IntEnum):
    """Tile terrain kinds on the grid."""

    WALL = 0
    FLOOR = 1
    GLASS_WALL = 2
    SAND = 3


# Terrain an actor may stand on.
PASSABLE_TERRAIN = frozenset({Terrain.FLOOR, Terrain.SAND})

# Terrain that blocks line of sight. Glass is impassable but see-through.
OPAQUE_TERRAIN = frozenset({Terrain.WALL})
