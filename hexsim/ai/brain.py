"""AIBrain: stateless decision logic for monsters.

Priority order:
  1. A visible hostile on an adjacent tile gets hit.
  2. A visible hostile further away gets approached, one step per tick.
  3. Otherwise wander: walk forward, turn, or idle, chosen by a
     deterministic roll so identical seeds replay identically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexsim.actions.base import Action
from hexsim.ai.perception import Perception
from hexsim.core.enums import Direction, Domain, Relative

if TYPE_CHECKING:
    from hexsim.config import SimulationConfig
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState
    from hexsim.systems.rng import DeterministicRNG


class AIBrain:
    """Decides one action per tick for a non-player actor."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: SimulationConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def decide(self, actor: Actor, world: WorldState) -> Action | None:
        grid = world.grid
        target = Perception.nearest_hostile(actor, world)
        if target is not None:
            toward = Perception.direction_toward(actor.p, target.p, grid)
            relative = toward - actor.pos.dir
            if Perception.is_adjacent(actor.p, target.p, grid):
                return Action.melee(relative)
            return Action.move(relative)
        return self._wander(actor, world)

    def _wander(self, actor: Actor, world: WorldState) -> Action | None:
        cfg = self._config
        # Even keys drive the wander roll, odd keys the turn direction.
        roll = self._rng.next_float(Domain.AI_DECISION, actor.id * 2, world.tick)
        if roll < cfg.wander_move_chance:
            ahead = world.grid.wrap(actor.p + actor.pos.dir)
            if world.grid.is_free(ahead):
                return Action.move(Relative.FORWARD)
            # Facing a wall or a friend; turn away instead.
            roll = cfg.wander_move_chance
        if roll < cfg.wander_move_chance + cfg.wander_turn_chance:
            clockwise = self._rng.next_bool(Domain.AI_DECISION, actor.id * 2 + 1, world.tick)
            return Action.turn(Direction(1) if clockwise else Direction(5))
        return None
