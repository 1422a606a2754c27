"""Core data models: Point, Position, Stats."""

from __future__ import annotations

from dataclasses import dataclass

from hexsim.core.enums import Direction, Race, Relative


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable axial hex coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point | Direction) -> Point:
        if isinstance(other, Direction):
            other = DIRECTION_OFFSETS[other]
        return Point(self.x + other.x, self.y + other.y)

    def neighbors(self) -> list[Point]:
        return [self + d for d in ALL_DIRECTIONS]

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Position:
    """A point plus the direction the occupant is facing."""

    p: Point
    dir: Direction = Direction.NORTH

    def __add__(self, turn: Direction) -> Position:
        """Rotate the facing clockwise by *turn*; the point is unchanged."""
        return Position(self.p, self.dir + turn)

    def __repr__(self) -> str:
        return f"{self.p}->{self.dir.name}"


ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

# Axial offsets, clockwise. d and d+3 are opposite.
DIRECTION_OFFSETS: dict[int, Point] = {
    Direction.NORTH: Point(0, -1),
    Direction.NORTH_EAST: Point(1, -1),
    Direction.SOUTH_EAST: Point(1, 0),
    Direction.SOUTH: Point(0, 1),
    Direction.SOUTH_WEST: Point(-1, 1),
    Direction.NORTH_WEST: Point(-1, 0),
}


def hex_length(dx: int, dy: int) -> int:
    return (abs(dx) + abs(dy) + abs(dx + dy)) // 2


def rotate(facing: Direction, turn: Direction | Relative) -> Direction:
    """Absolute direction of *turn* taken relative to *facing*."""
    return facing + turn


@dataclass(slots=True)
class Stats:
    """Mutable combat statistics for an actor."""

    hp: int = 10
    max_hp: int = 10
    atk: int = 3
    def_: int = 0
    vision_range: int = 6

    @property
    def alive(self) -> bool:
        return self.hp > 0


# (hp, atk, def, vision_range) per race
RACE_STATS: dict[int, tuple[int, int, int, int]] = {
    Race.HUMAN: (30, 6, 2, 8),
    Race.SCOUT: (8, 3, 0, 8),
    Race.GRUNT: (14, 5, 1, 5),
    Race.HEAVY: (24, 7, 3, 4),
}


def stats_for(race: Race) -> Stats:
    hp, atk, def_, vision = RACE_STATS[race]
    return Stats(hp=hp, max_hp=hp, atk=atk, def_=def_, vision_range=vision)
