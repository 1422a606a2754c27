"""Perception system: what an actor can see.

All methods are stateless. Distances and directions account for the
grid wrapping around at its edges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexsim.core.enums import Direction
from hexsim.core.models import ALL_DIRECTIONS, Point, hex_length

if TYPE_CHECKING:
    from hexsim.core.actor import Actor
    from hexsim.core.grid import Grid
    from hexsim.core.world_state import WorldState


class Perception:
    """Stateless perception utilities."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Vision
    # ------------------------------------------------------------------

    @staticmethod
    def visible_tiles(actor: Actor, grid: Grid) -> frozenset[Point]:
        """Wrapped points within the actor's vision range and line of sight."""
        origin = actor.p
        vr = actor.stats.vision_range
        seen: set[Point] = set()
        for dy in range(-vr, vr + 1):
            for dx in range(max(-vr, -dy - vr), min(vr, -dy + vr) + 1):
                target = Point(origin.x + dx, origin.y + dy)
                if grid.has_line_of_sight(origin, target):
                    seen.add(grid.wrap(target))
        return frozenset(seen)

    @staticmethod
    def visible_actors(actor: Actor, world: WorldState) -> list[Actor]:
        """Living actors standing on tiles in *actor*'s line of sight, by id."""
        result: list[Actor] = []
        for p in actor.los:
            other = world.actor_at(p)
            if other is not None and other is not actor and other.alive:
                result.append(other)
        result.sort(key=lambda a: a.id)
        return result

    @staticmethod
    def nearest_hostile(actor: Actor, world: WorldState) -> Actor | None:
        """Closest visible actor on the other side, tie-broken by lowest id.

        Monsters are hostile to the player and the player to monsters;
        monsters do not fight each other.
        """
        grid = world.grid
        hostiles = [o for o in Perception.visible_actors(actor, world) if o.is_player != actor.is_player]
        if not hostiles:
            return None
        return min(hostiles, key=lambda o: (Perception.wrapped_distance(actor.p, o.p, grid), o.id))

    # ------------------------------------------------------------------
    # Geometry on the torus
    # ------------------------------------------------------------------

    @staticmethod
    def wrapped_delta(a: Point, b: Point, grid: Grid) -> tuple[int, int]:
        """Shortest per-axis offset from *a* to *b* across the wrap."""
        w, h = grid.width, grid.height
        dx = (b.x - a.x) % w
        dy = (b.y - a.y) % h
        if dx > w // 2:
            dx -= w
        if dy > h // 2:
            dy -= h
        return dx, dy

    @staticmethod
    def wrapped_distance(a: Point, b: Point, grid: Grid) -> int:
        dx, dy = Perception.wrapped_delta(a, b, grid)
        return hex_length(dx, dy)

    @staticmethod
    def direction_toward(origin: Point, target: Point, grid: Grid) -> Direction:
        """The absolute direction whose step lands closest to *target*."""
        best = ALL_DIRECTIONS[0]
        best_dist = None
        for d in ALL_DIRECTIONS:
            dist = Perception.wrapped_distance(grid.wrap(origin + d), target, grid)
            if best_dist is None or dist < best_dist:
                best, best_dist = d, dist
        return best

    @staticmethod
    def is_adjacent(a: Point, b: Point, grid: Grid) -> bool:
        return any(grid.wrap(a + d) == b for d in ALL_DIRECTIONS)
