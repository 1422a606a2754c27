"""Mutable authoritative world state, mutated only by the engine.

Actors live in an arena keyed by integer id. A tile's occupant id is the
single owning reference: clearing it frees the arena slot. The registry
and the player slot hold ids only and must re-resolve them on every use.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.core.enums import Race
from hexsim.core.grid import Grid
from hexsim.core.models import Point, Position
from hexsim.utils.event_log import EventLog, SimEvent

if TYPE_CHECKING:
    from hexsim.core.actor import Actor

logger = logging.getLogger(__name__)


class WorldState:
    """The single source of truth for the simulation."""

    __slots__ = ("tick", "seed", "grid", "actors", "registry", "player_id", "event_log", "_next_actor_id")

    def __init__(self, seed: int, grid: Grid, event_log: EventLog | None = None) -> None:
        self.tick: int = 0
        self.seed: int = seed
        self.grid: Grid = grid
        self.actors: dict[int, Actor] = {}
        self.registry: list[int] = []
        self.player_id: int | None = None
        self.event_log: EventLog = event_log if event_log is not None else EventLog()
        self._next_actor_id: int = 1

    # -- handles --

    def resolve(self, actor_id: int | None) -> Actor | None:
        """Return the live arena entry for *actor_id*, or None if it was destroyed."""
        if actor_id is None:
            return None
        return self.actors.get(actor_id)

    @property
    def player(self) -> Actor | None:
        return self.resolve(self.player_id)

    def actor_at(self, p: Point) -> Actor | None:
        return self.resolve(self.grid.occupant(p))

    def living(self) -> list[Actor]:
        """Registry actors that still resolve and are alive, in registry order."""
        return [self.actors[aid] for aid in self.registry if self._is_live(aid)]

    def census(self) -> dict[Race, int]:
        counts = {race: 0 for race in Race}
        for actor in self.living():
            counts[actor.race] += 1
        return counts

    # -- lifecycle --

    def place(self, actor: Actor) -> int | None:
        """Give *actor* to the tile at its position and register it.

        Fails without side effects when the tile is impassable or already
        owns an occupant.
        """
        p = actor.p
        if not self.grid.is_passable(p):
            logger.debug("Spawn rejected at %s: %s is impassable", p, self.grid.get(p).name)
            return None
        if self.grid.occupant(p) is not None:
            logger.debug("Spawn rejected at %s: occupied by %d", p, self.grid.occupant(p))
            return None

        aid = self._next_actor_id
        self._next_actor_id += 1
        actor.id = aid
        self.actors[aid] = actor
        self.grid.set_occupant(p, aid)
        self.registry.append(aid)
        self.emit("spawn", f"{actor.kind} #{aid} spawned at {p}", (aid,))
        return aid

    def release(self, p: Point) -> Actor | None:
        """Clear the occupant of the tile at *p*, destroying that actor.

        Returns the destroyed actor so callers can report on it. Stale ids
        in the registry are dropped at the next prune.
        """
        aid = self.grid.occupant(p)
        if aid is None:
            return None
        self.grid.set_occupant(p, None)
        actor = self.actors.pop(aid, None)
        if actor is not None:
            logger.info("Tick %d: Actor %d (%s) died at %s.", self.tick, aid, actor.kind, p)
            self.emit("death", f"{actor.kind} #{aid} died", (aid,))
        return actor

    def move_actor_if_possible(self, actor: Actor, position: Position) -> bool:
        """Relocate *actor* to *position* unless blocked.

        A position on the actor's own point is a pure turn and always
        succeeds. Otherwise impassable terrain or an existing occupant
        leave everything untouched.
        """
        src = actor.p
        dst = position.p
        if dst == src:
            actor.pos_set(position)
            return True
        if not self.grid.is_passable(dst):
            logger.debug("Actor %d blocked by terrain at %s", actor.id, dst)
            return False
        if self.grid.occupant(dst) is not None:
            logger.debug("Actor %d blocked by occupant at %s", actor.id, dst)
            return False

        self.grid.set_occupant(dst, self.grid.occupant(src))
        self.grid.set_occupant(src, None)
        actor.pos_set(position)
        return True

    def prune_registry(self) -> int:
        """Drop every registry id that no longer resolves to a living actor.

        Returns the number of ids removed.
        """
        before = len(self.registry)
        self.registry = [aid for aid in self.registry if self._is_live(aid)]
        return before - len(self.registry)

    def _is_live(self, actor_id: int) -> bool:
        actor = self.actors.get(actor_id)
        return actor is not None and actor.alive

    # -- diagnostics --

    def occupancy_errors(self) -> list[str]:
        """Describe every violation of the tile/actor ownership invariant."""
        errors: list[str] = []
        seen: dict[int, Point] = {}
        for p, aid in self.grid.occupied():
            if aid in seen:
                errors.append(f"actor {aid} owned by both {seen[aid]} and {p}")
            seen[aid] = p
            actor = self.actors.get(aid)
            if actor is None:
                errors.append(f"tile {p} owns missing actor {aid}")
            elif actor.p != p:
                errors.append(f"tile {p} owns actor {aid} recorded at {actor.p}")
        for aid in self.actors:
            if aid not in seen:
                errors.append(f"actor {aid} is in the arena but no tile owns it")
        return errors

    def emit(self, category: str, message: str, actor_ids: tuple[int, ...] = ()) -> None:
        self.event_log.append(SimEvent(
            tick=self.tick, category=category, message=message, actor_ids=actor_ids,
        ))
