"""Actor: a mobile occupant of the grid with a race, a pose and combat stats."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from hexsim.core.enums import Race
from hexsim.core.models import Point, Position, Stats, stats_for

if TYPE_CHECKING:
    from hexsim.actions.base import Action
    from hexsim.core.grid import Grid
    from hexsim.core.world_state import WorldState

logger = logging.getLogger(__name__)


class Controller(Protocol):
    """Source of an actor's decisions: AI for monsters, queued input for the player."""

    def decide(self, actor: Actor, world: WorldState) -> Action | None: ...


@dataclass(slots=True)
class Actor:
    """A creature on the grid.

    The actor never owns its tile; the grid records the actor's id and the
    world state's arena holds the object. ``id`` is 0 until the actor has
    been placed.
    """

    race: Race
    pos: Position
    is_player: bool = False
    stats: Stats = field(default_factory=Stats)
    controller: Controller | None = None
    id: int = 0
    pos_prev: Position | None = None
    los: frozenset[Point] = frozenset()
    los_dirty: bool = True
    last_action: Action | None = None
    pending_action: Action | None = None

    @classmethod
    def create(
        cls,
        grid: Grid,
        position: Position,
        is_player: bool,
        race: Race,
        controller: Controller | None = None,
    ) -> Actor:
        pos = grid.wrap(position)
        return cls(
            race=race, pos=pos, is_player=is_player,
            stats=stats_for(race), controller=controller, pos_prev=pos,
        )

    @property
    def p(self) -> Point:
        return self.pos.p

    @property
    def kind(self) -> str:
        return self.race.name.lower()

    @property
    def alive(self) -> bool:
        return self.stats.alive

    @property
    def needs_los_refresh(self) -> bool:
        return self.los_dirty

    # -- pose --

    def pos_set(self, position: Position) -> None:
        if position != self.pos:
            self.los_dirty = True
        self.pos = position

    def pos_prev_set(self, position: Position) -> None:
        self.pos_prev = position

    # -- perception --

    def update_los(self, grid: Grid) -> None:
        from hexsim.ai.perception import Perception

        self.los = Perception.visible_tiles(self, grid)
        self.los_dirty = False

    # -- turn cycle --

    def decide(self, world: WorldState) -> Action | None:
        if self.controller is None:
            return None
        self.pending_action = self.controller.decide(self, world)
        return self.pending_action

    def action_done(self) -> None:
        self.last_action = self.pending_action
        self.pending_action = None

    # -- combat --

    def attacked_by(self, attacker: Actor) -> int:
        """Take a hit from *attacker*. Returns the damage dealt."""
        damage = max(1, attacker.stats.atk - self.stats.def_)
        self.stats.hp -= damage
        logger.debug(
            "Actor %d (%s) hit by %d (%s) for %d [HP: %d/%d]",
            self.id, self.kind, attacker.id, attacker.kind,
            damage, max(self.stats.hp, 0), self.stats.max_hp,
        )
        return damage

    def attacked(self, target: Actor) -> int:
        """Receive the counter-attack from *target* after hitting it.

        A target that did not survive the blow cannot strike back.
        """
        if not target.alive:
            return 0
        damage = max(1, (target.stats.atk - self.stats.def_) // 2)
        self.stats.hp -= damage
        logger.debug(
            "Actor %d (%s) countered by %d (%s) for %d [HP: %d/%d]",
            self.id, self.kind, target.id, target.kind,
            damage, max(self.stats.hp, 0), self.stats.max_hp,
        )
        return damage

    def __repr__(self) -> str:
        return f"Actor(#{self.id} {self.kind} at {self.pos!r}, hp={self.stats.hp})"
