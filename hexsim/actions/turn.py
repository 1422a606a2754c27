"""TurnAction: rotate in place."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexsim.actions.base import Action
from hexsim.core.enums import Direction
from hexsim.core.exceptions import IllegalActionError

if TYPE_CHECKING:
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState


class TurnAction:
    """Stateless handler for TURN. Never blocked, never touches occupancy."""

    @staticmethod
    def apply(action: Action, actor: Actor, world: WorldState) -> bool:
        if not isinstance(action.direction, Direction):
            raise IllegalActionError(f"illegal turn {action!r} by actor {actor.id}")
        return world.move_actor_if_possible(actor, actor.pos + action.direction)
