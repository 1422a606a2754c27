"""AI layer: perception and decision-making."""

from hexsim.ai.brain import AIBrain
from hexsim.ai.perception import Perception
from hexsim.ai.player_input import PlayerInput

__all__ = ["AIBrain", "Perception", "PlayerInput"]
