"""WorldLoop: the simulation core.

Owns the world state and the random source. Each tick walks a copy of
the registry taken before anyone acts, so actors spawned mid-tick wait
for the next one and deaths mid-tick cannot disturb the iteration. The
live registry is pruned once the pass is over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexsim.ai.brain import AIBrain
from hexsim.ai.player_input import PlayerInput
from hexsim.config import SimulationConfig
from hexsim.core.grid import Grid
from hexsim.core.world_state import WorldState
from hexsim.engine.action_resolver import ActionResolver
from hexsim.systems.generator import EntityGenerator, MapGenerator
from hexsim.systems.rng import DeterministicRNG
from hexsim.utils.event_log import EventLog

if TYPE_CHECKING:
    from hexsim.actions.base import Action
    from hexsim.core.actor import Actor
    from hexsim.core.enums import Race
    from hexsim.core.models import Position

logger = logging.getLogger(__name__)


class WorldLoop:
    """The heartbeat of the simulation.

    Single-threaded and fully synchronous: one ``tick()`` call is one
    atomic step from the caller's point of view.
    """

    __slots__ = (
        "_config",
        "_world",
        "_rng",
        "_resolver",
        "_entities",
        "_map_generator",
        "_player_input",
    )

    def __init__(
        self,
        config: SimulationConfig,
        world: WorldState,
        rng: DeterministicRNG,
        player_input: PlayerInput | None = None,
        resolver: ActionResolver | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._rng = rng
        self._player_input = player_input or PlayerInput()
        self._resolver = resolver or ActionResolver()
        self._entities = EntityGenerator(config, rng, AIBrain(config, rng), self._player_input)
        self._map_generator = MapGenerator(config, rng, self._entities)

    @classmethod
    def new(cls, config: SimulationConfig | None = None) -> WorldLoop:
        """An all-floor world with no actors, sized and seeded by *config*."""
        config = config or SimulationConfig()
        grid = Grid(config.grid_width, config.grid_height)
        world = WorldState(seed=config.world_seed, grid=grid, event_log=EventLog(config.event_log_size))
        return cls(config, world, DeterministicRNG(config.world_seed))

    # -- accessors --

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def grid(self) -> Grid:
        return self._world.grid

    @property
    def player(self) -> Actor | None:
        return self._world.player

    @property
    def player_input(self) -> PlayerInput:
        return self._player_input

    # -- spawning --

    def create_actor(self, position: Position, is_player: bool, race: Race) -> Actor:
        return self._entities.create(self._world.grid, position, is_player, race)

    def spawn(self, actor: Actor) -> int | None:
        return self._entities.spawn(self._world, actor)

    def spawn_random(self, is_player: bool, race: Race) -> int:
        return self._entities.spawn_random(self._world, is_player, race)

    # -- actions --

    def move_actor_if_possible(self, actor: Actor, position: Position) -> bool:
        return self._world.move_actor_if_possible(actor, position)

    def perform_action(self, actor: Actor, action: Action) -> bool:
        return self._resolver.perform(actor, action, self._world)

    # -- world generation & perception --

    def randomize_map(self) -> None:
        self._map_generator.randomize(self._world)

    def update_player_los(self) -> None:
        """Recompute the player's line of sight, if there is a living player."""
        player = self._world.player
        if player is not None:
            player.update_los(self._world.grid)

    # -- ticking --

    def tick(self) -> None:
        """Advance the world by one step."""
        world = self._world
        acted = 0
        for aid in list(world.registry):
            actor = world.resolve(aid)
            if actor is None or not actor.alive:
                continue
            if not actor.is_player and actor.needs_los_refresh:
                actor.update_los(world.grid)
            action = actor.decide(world)
            if action is None:
                continue
            self.perform_action(actor, action)
            actor.action_done()
            acted += 1

        pruned = world.prune_registry()
        logger.debug("Tick %d: %d acted, %d pruned, %d remain", world.tick, acted, pruned, len(world.registry))
        world.tick += 1

    def tick_once(self) -> bool:
        """Execute a single tick. Returns False if the simulation should stop."""
        world = self._world
        if not world.registry and world.tick > 0:
            logger.info("Tick %d: No actors alive, simulation ended.", world.tick)
            return False
        player = world.player
        if world.player_id is not None and (player is None or not player.alive):
            logger.info("Tick %d: Player is dead, simulation ended.", world.tick)
            return False
        if world.tick >= self._config.max_ticks:
            logger.info("Tick %d: Max ticks reached.", world.tick)
            return False

        self.tick()
        return True

    def run(self) -> None:
        """Tick until max_ticks, the player dies, or nobody is left."""
        world = self._world
        logger.info("=== Simulation started (seed=%d, %d actors) ===", world.seed, len(world.registry))

        while self.tick_once():
            if world.tick % self._config.log_every == 0:
                logger.info("Tick %d: %d actors alive", world.tick, len(world.registry))

        logger.info("=== Simulation finished at tick %d ===", world.tick)
