"""Engine systems: RNG, actor spawning, map generation."""

from hexsim.systems.rng import DeterministicRNG
from hexsim.systems.generator import EntityGenerator, MapGenerator

__all__ = ["DeterministicRNG", "EntityGenerator", "MapGenerator"]
