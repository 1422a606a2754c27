"""MoveAction: one step relative to the actor's facing.

RUN resolves exactly like MOVE; a caller wanting faster movement issues
RUN on consecutive turns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.actions.base import Action
from hexsim.core.models import Position, rotate

if TYPE_CHECKING:
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for MOVE and RUN."""

    @staticmethod
    def target(action: Action, actor: Actor, world: WorldState) -> Position:
        facing = actor.pos.dir
        return Position(world.grid.wrap(actor.p + rotate(facing, action.direction)), facing)

    @staticmethod
    def apply(action: Action, actor: Actor, world: WorldState) -> bool:
        dest = MoveAction.target(action, actor, world)
        moved = world.move_actor_if_possible(actor, dest)
        if moved:
            logger.debug("Actor %d moved %s -> %s", actor.id, actor.pos_prev, dest)
        return moved
