"""Applies a single actor's chosen action to the world."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.actions.combat import CombatAction
from hexsim.actions.move import MoveAction
from hexsim.actions.turn import TurnAction
from hexsim.core.enums import ActionType

if TYPE_CHECKING:
    from hexsim.actions.base import Action
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState

logger = logging.getLogger(__name__)


class ActionResolver:
    """Dispatches an action to its handler.

    Every outcome short of a contract violation is silent: a blocked move
    or a swing at an empty tile simply has no effect. Returns whether the
    action changed anything.
    """

    __slots__ = ()

    def perform(self, actor: Actor, action: Action, world: WorldState) -> bool:
        actor.pos_prev_set(actor.pos)

        match action.verb:
            case ActionType.TURN:
                return TurnAction.apply(action, actor, world)

            case ActionType.MOVE | ActionType.RUN:
                return MoveAction.apply(action, actor, world)

            case ActionType.MELEE:
                return CombatAction.apply(action, actor, world)

            case ActionType.USE | ActionType.WAIT:
                return False

        logger.debug("Unhandled %r from actor %d", action, actor.id)
        return False
