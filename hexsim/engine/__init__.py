"""Engine layer: action resolution and the world loop."""

from hexsim.engine.action_resolver import ActionResolver
from hexsim.engine.world_loop import WorldLoop

__all__ = ["ActionResolver", "WorldLoop"]
