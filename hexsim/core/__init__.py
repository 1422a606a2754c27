"""Core data models and world representation."""

from hexsim.core.enums import ActionType, Direction, Domain, Race, Relative, Terrain
from hexsim.core.models import Point, Position, Stats
from hexsim.core.grid import Grid
from hexsim.core.actor import Actor
from hexsim.core.world_state import WorldState
from hexsim.core.snapshot import WorldSnapshot

__all__ = [
    "ActionType",
    "Actor",
    "Direction",
    "Domain",
    "Grid",
    "Point",
    "Position",
    "Race",
    "Relative",
    "Stats",
    "Terrain",
    "WorldSnapshot",
    "WorldState",
]
