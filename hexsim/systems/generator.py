"""Actor spawning and one-shot procedural map generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.core.actor import Actor
from hexsim.core.enums import Direction, Domain, Race, Terrain
from hexsim.core.exceptions import SpawnExhaustedError
from hexsim.core.models import Point, Position

if TYPE_CHECKING:
    from hexsim.ai.brain import AIBrain
    from hexsim.ai.player_input import PlayerInput
    from hexsim.config import SimulationConfig
    from hexsim.core.grid import Grid
    from hexsim.core.world_state import WorldState
    from hexsim.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# Seeding order must match the weights tuple built from config.
_SEED_TERRAIN: tuple[Terrain, ...] = (Terrain.GLASS_WALL, Terrain.SAND, Terrain.WALL)


class EntityGenerator:
    """Places actors on the grid, either where asked or at random."""

    __slots__ = ("_config", "_rng", "_brain", "_player_input", "_draws")

    def __init__(
        self,
        config: SimulationConfig,
        rng: DeterministicRNG,
        brain: AIBrain,
        player_input: PlayerInput,
    ) -> None:
        self._config = config
        self._rng = rng
        self._brain = brain
        self._player_input = player_input
        self._draws = 0

    def create(self, grid: Grid, position: Position, is_player: bool, race: Race) -> Actor:
        """Build an actor wired to the matching controller, not yet placed."""
        controller = self._player_input if is_player else self._brain
        return Actor.create(grid, position, is_player, race, controller)

    def spawn(self, world: WorldState, actor: Actor) -> int | None:
        """Hand *actor* to its tile. Returns its id, or None if the tile refused it."""
        aid = world.place(actor)
        if aid is not None:
            logger.debug("Tick %d: Spawned %s #%d at %s", world.tick, actor.kind, aid, actor.pos)
        return aid

    def spawn_random(self, world: WorldState, is_player: bool, race: Race) -> int:
        """Retry random placements until one lands on a free passable tile.

        With ``spawn_attempt_limit`` unset this never gives up, so on a grid
        with no free tile it does not return.
        """
        limit = self._config.spawn_attempt_limit
        attempts = 0
        while True:
            if limit is not None and attempts >= limit:
                logger.warning("Gave up placing %s after %d attempts", race.name.lower(), attempts)
                raise SpawnExhaustedError(attempts)
            attempts += 1
            actor = self.create(world.grid, self.random_position(world.grid), is_player, race)
            aid = self.spawn(world, actor)
            if aid is not None:
                return aid

    def random_position(self, grid: Grid) -> Position:
        draw = self._draws
        self._draws += 1
        x = self._rng.next_int(Domain.SPAWN, draw, 0, 0, grid.width - 1)
        y = self._rng.next_int(Domain.SPAWN, draw, 1, 0, grid.height - 1)
        facing = Direction(self._rng.next_int(Domain.SPAWN, draw, 2, 0, 5))
        return grid.wrap(Position(Point(x, y), facing))


class MapGenerator:
    """Scatters terrain blobs, walls in the edges, then populates the map."""

    __slots__ = ("_config", "_rng", "_entities")

    def __init__(self, config: SimulationConfig, rng: DeterministicRNG, entities: EntityGenerator) -> None:
        self._config = config
        self._rng = rng
        self._entities = entities

    def randomize(self, world: WorldState) -> None:
        grid = world.grid
        self.seed_terrain(grid)
        self.wall_borders(grid)
        self.populate(world)
        logger.info(
            "Generated %dx%d map: %d actors, player #%s",
            grid.width, grid.height, len(world.registry), world.player_id,
        )

    def seed_terrain(self, grid: Grid) -> None:
        """Paint random seven-hex blobs. Later blobs overwrite earlier ones."""
        cfg = self._config
        weights = (cfg.glass_wall_weight, cfg.sand_weight, cfg.wall_weight)
        for i in range(grid.area // cfg.terrain_seed_divisor):
            x = self._rng.next_int(Domain.MAP_GEN, i, 0, 0, grid.width - 1)
            y = self._rng.next_int(Domain.MAP_GEN, i, 1, 0, grid.height - 1)
            terrain = _SEED_TERRAIN[self._rng.next_weighted(Domain.MAP_GEN, i, 2, weights)]
            center = Point(x, y)
            grid.set(center, terrain)
            for n in center.neighbors():
                grid.set(grid.wrap(n), terrain)

    @staticmethod
    def wall_borders(grid: Grid) -> None:
        """Force WALL on the outermost rows and columns.

        The grid still wraps across these edges, so they thin traffic
        rather than seal the map.
        """
        w, h = grid.width, grid.height
        for x in range(w):
            grid.set(Point(x, 0), Terrain.WALL)
            grid.set(Point(x, h - 1), Terrain.WALL)
        for y in range(h):
            grid.set(Point(0, y), Terrain.WALL)
            grid.set(Point(w - 1, y), Terrain.WALL)

    def populate(self, world: WorldState) -> None:
        cfg = self._config
        area = world.grid.area
        for race, divisor in (
            (Race.SCOUT, cfg.scout_divisor),
            (Race.GRUNT, cfg.grunt_divisor),
            (Race.HEAVY, cfg.heavy_divisor),
        ):
            for _ in range(area // divisor):
                self._entities.spawn_random(world, False, race)
        world.player_id = self._entities.spawn_random(world, True, Race.HUMAN)
