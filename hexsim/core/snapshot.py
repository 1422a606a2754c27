"""Immutable snapshot of the world state for presentation layers and tests."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from hexsim.core.enums import Terrain
from hexsim.core.world_state import WorldState


@dataclass(frozen=True, slots=True)
class ActorView:
    """Read-only copy of the parts of an actor a viewer cares about."""

    id: int
    race: int
    x: int
    y: int
    facing: int
    hp: int
    is_player: bool


@dataclass(frozen=True, slots=True)
class WorldSnapshot:
    """Read-only copy of the world. Two snapshots compare equal iff the
    grid, the arena and the registry are identical.
    """

    tick: int
    seed: int
    width: int
    height: int
    terrain: tuple[Terrain, ...]
    occupants: tuple[int | None, ...]
    actors: tuple[ActorView, ...]
    registry: tuple[int, ...]
    player_id: int | None

    @classmethod
    def from_world(cls, world: WorldState) -> WorldSnapshot:
        grid = world.grid
        views = tuple(
            ActorView(
                id=a.id, race=int(a.race), x=a.p.x, y=a.p.y,
                facing=int(a.pos.dir), hp=a.stats.hp, is_player=a.is_player,
            )
            for _, a in sorted(world.actors.items())
        )
        return cls(
            tick=world.tick,
            seed=world.seed,
            width=grid.width,
            height=grid.height,
            terrain=grid.terrain_tuple(),
            occupants=grid.occupant_tuple(),
            actors=views,
            registry=tuple(world.registry),
            player_id=world.player_id,
        )

    def terrain_fingerprint(self) -> str:
        """Short digest of the terrain layer alone."""
        raw = bytes(int(t) for t in self.terrain)
        return hashlib.sha256(raw).hexdigest()[:16]
