"""CombatAction: resolves melee against the tile in the given direction.

Damage math belongs to the actors: the target takes the blow first, then
the attacker takes the counter. A slain target is taken off the grid
immediately. An attacker killed by the counter keeps its tile; its
registry handle goes at the next prune.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.actions.base import Action
from hexsim.core.models import rotate

if TYPE_CHECKING:
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState

logger = logging.getLogger(__name__)


class CombatAction:
    """Stateless handler for MELEE."""

    @staticmethod
    def apply(action: Action, actor: Actor, world: WorldState) -> bool:
        target_p = world.grid.wrap(actor.p + rotate(actor.pos.dir, action.direction))
        target = world.actor_at(target_p)
        if target is None or target is actor:
            logger.debug("Actor %d swings at empty tile %s", actor.id, target_p)
            return False

        dealt = target.attacked_by(actor)
        taken = actor.attacked(target)
        logger.debug(
            "Tick %d: Actor %d (%s) hits %d (%s) for %d, takes %d back",
            world.tick, actor.id, actor.kind, target.id, target.kind, dealt, taken,
        )
        world.emit(
            "combat",
            f"{actor.kind} #{actor.id} hits {target.kind} #{target.id} for {dealt}",
            (actor.id, target.id),
        )

        if not target.alive:
            world.release(target_p)
        return True
