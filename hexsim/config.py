"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for the simulation run."""

    # World
    world_seed: int = 42
    grid_width: int = 100
    grid_height: int = 100

    # Terrain seeding: one seven-hex blob per this many tiles
    terrain_seed_divisor: int = 12
    glass_wall_weight: int = 1
    sand_weight: int = 1
    wall_weight: int = 4

    # Population: one actor of each race per this many tiles
    scout_divisor: int = 200
    grunt_divisor: int = 400
    heavy_divisor: int = 800

    # Random placement retries before giving up; None retries forever
    spawn_attempt_limit: int | None = None

    # AI wander odds (remaining probability idles)
    wander_move_chance: float = 0.6
    wander_turn_chance: float = 0.25

    # Timing
    max_ticks: int = 1000

    # Logging
    log_level: str = "INFO"
    log_every: int = 50
    event_log_size: int = 2000
