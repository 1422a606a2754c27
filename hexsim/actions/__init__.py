"""Action system: the action value and its per-verb handlers."""

from hexsim.actions.base import Action
from hexsim.actions.combat import CombatAction
from hexsim.actions.move import MoveAction
from hexsim.actions.turn import TurnAction

__all__ = ["Action", "CombatAction", "MoveAction", "TurnAction"]
