"""Toroidal hex grid: terrain plus per-tile occupant ids."""

from __future__ import annotations

from typing import Iterator, overload

from hexsim.core.enums import OPAQUE_TERRAIN, PASSABLE_TERRAIN, Terrain
from hexsim.core.models import Point, Position, hex_length


class Grid:
    """Fixed-size wrap-around grid backed by flat lists.

    Each tile holds a terrain kind and at most one occupant, stored as the
    occupant's actor id. Every accessor wraps its point first, so callers
    may pass coordinates that have stepped off an edge.
    """

    __slots__ = ("_width", "_height", "_tiles", "_occupants")

    def __init__(self, width: int, height: int, default: Terrain = Terrain.FLOOR) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._tiles: list[Terrain] = [default] * (width * height)
        self._occupants: list[int | None] = [None] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def area(self) -> int:
        return self._width * self._height

    # -- wrap-around --

    @overload
    def wrap(self, where: Point) -> Point: ...

    @overload
    def wrap(self, where: Position) -> Position: ...

    def wrap(self, where):
        """Normalize a point (or a position's point) into grid bounds."""
        if isinstance(where, Position):
            return Position(self.wrap(where.p), where.dir)
        return Point(where.x % self._width, where.y % self._height)

    def _idx(self, p: Point) -> int:
        return (p.y % self._height) * self._width + (p.x % self._width)

    # -- terrain --

    def get(self, p: Point) -> Terrain:
        return self._tiles[self._idx(p)]

    def set(self, p: Point, terrain: Terrain) -> None:
        self._tiles[self._idx(p)] = terrain

    def is_passable(self, p: Point) -> bool:
        return self._tiles[self._idx(p)] in PASSABLE_TERRAIN

    def is_opaque(self, p: Point) -> bool:
        return self._tiles[self._idx(p)] in OPAQUE_TERRAIN

    # -- occupancy --

    def occupant(self, p: Point) -> int | None:
        return self._occupants[self._idx(p)]

    def set_occupant(self, p: Point, actor_id: int | None) -> None:
        self._occupants[self._idx(p)] = actor_id

    def is_free(self, p: Point) -> bool:
        """Passable and unoccupied."""
        idx = self._idx(p)
        return self._tiles[idx] in PASSABLE_TERRAIN and self._occupants[idx] is None

    def occupied(self) -> Iterator[tuple[Point, int]]:
        """Yield ``(point, actor_id)`` for every occupied tile."""
        w = self._width
        for idx, aid in enumerate(self._occupants):
            if aid is not None:
                yield Point(idx % w, idx // w), aid

    def points(self) -> Iterator[Point]:
        for y in range(self._height):
            for x in range(self._width):
                yield Point(x, y)

    # -- line-of-sight (hex line) --

    def has_line_of_sight(self, a: Point, b: Point) -> bool:
        """Check for a clear line between two (unwrapped) points.

        Walks the hex line from *a* to *b* and returns False if any opaque
        tile lies strictly between the endpoints. Points may lie outside
        the grid; each step is wrapped before lookup.
        """
        for p in hex_line(a, b)[1:-1]:
            if self.is_opaque(p):
                return False
        return True

    # -- copy --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new._width = self._width
        new._height = self._height
        new._tiles = list(self._tiles)
        new._occupants = list(self._occupants)
        return new

    def terrain_tuple(self) -> tuple[Terrain, ...]:
        return tuple(self._tiles)

    def occupant_tuple(self) -> tuple[int | None, ...]:
        return tuple(self._occupants)


def _cube_round(x: float, y: float, z: float) -> tuple[int, int]:
    rx, ry, rz = round(x), round(y), round(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return rx, rz


def hex_line(a: Point, b: Point) -> list[Point]:
    """All hexes on the straight line from *a* to *b*, inclusive."""
    n = hex_length(b.x - a.x, b.y - a.y)
    if n == 0:
        return [a]
    # Nudge off exact edges so ties round consistently.
    ax, az = a.x + 1e-6, a.y + 2e-6
    bx, bz = b.x + 1e-6, b.y + 2e-6
    ay, by = -ax - az, -bx - bz
    line: list[Point] = []
    for i in range(n + 1):
        t = i / n
        q, r = _cube_round(ax + (bx - ax) * t, ay + (by - ay) * t, az + (bz - az) * t)
        line.append(Point(q, r))
    return line
