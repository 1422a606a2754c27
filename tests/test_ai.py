"""Tests for perception, the monster brain and queued player input."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hexsim.actions.base import Action
from hexsim.ai.brain import AIBrain
from hexsim.ai.perception import Perception
from hexsim.core.enums import ActionType, Direction, Race, Relative, Terrain
from hexsim.core.models import Point, Position
from hexsim.systems.rng import DeterministicRNG
from tests.helpers.arena import Arena


def _brain(arena: Arena) -> AIBrain:
    return AIBrain(arena.config, DeterministicRNG(arena.config.world_seed))


class TestVisibleTiles:
    def test_radius_one_sees_seven_tiles(self):
        arena = Arena(20, 20)
        a = arena.add(10, 10)
        a.stats.vision_range = 1
        a.update_los(arena.world.grid)
        assert a.los == frozenset([Point(10, 10), *Point(10, 10).neighbors()])

    def test_wall_hides_what_is_behind_it(self):
        arena = Arena(20, 20)
        a = arena.add(10, 10)
        arena.wall(10, 9)
        a.update_los(arena.world.grid)
        assert Point(10, 9) in a.los
        assert Point(10, 8) not in a.los

    def test_glass_wall_is_transparent(self):
        arena = Arena(20, 20)
        a = arena.add(10, 10)
        arena.wall(10, 9, Terrain.GLASS_WALL)
        a.update_los(arena.world.grid)
        assert Point(10, 8) in a.los

    def test_visibility_wraps(self):
        arena = Arena(20, 20)
        a = arena.add(0, 0)
        a.stats.vision_range = 1
        a.update_los(arena.world.grid)
        assert Point(0, 19) in a.los
        assert Point(19, 0) in a.los


class TestPerceptionGeometry:
    def test_wrapped_distance(self):
        arena = Arena(20, 20)
        g = arena.world.grid
        assert Perception.wrapped_distance(Point(0, 0), Point(19, 0), g) == 1
        assert Perception.wrapped_distance(Point(3, 3), Point(3, 7), g) == 4

    def test_direction_toward(self):
        arena = Arena(20, 20)
        g = arena.world.grid
        assert Perception.direction_toward(Point(5, 5), Point(5, 1), g) == Direction.NORTH
        assert Perception.direction_toward(Point(5, 5), Point(9, 5), g) == Direction.SOUTH_EAST
        assert Perception.direction_toward(Point(0, 5), Point(19, 5), g) == Direction.NORTH_WEST

    def test_monsters_are_not_hostile_to_each_other(self):
        arena = Arena()
        a = arena.add(5, 5)
        arena.add(5, 4)
        a.update_los(arena.world.grid)
        assert Perception.nearest_hostile(a, arena.world) is None


class TestBrain:
    def test_adjacent_player_in_front_gets_hit(self):
        arena = Arena()
        grunt = arena.add(5, 5, facing=Direction.NORTH)
        arena.add(5, 4, race=Race.HUMAN, is_player=True)
        grunt.update_los(arena.world.grid)
        assert _brain(arena).decide(grunt, arena.world) == Action.melee(Direction.NORTH)

    def test_adjacent_player_behind_gets_hit(self):
        arena = Arena()
        grunt = arena.add(5, 5, facing=Direction.SOUTH)
        player = arena.add(5, 4, race=Race.HUMAN, is_player=True)
        grunt.update_los(arena.world.grid)
        action = _brain(arena).decide(grunt, arena.world)
        assert action.verb == ActionType.MELEE
        arena.loop.perform_action(grunt, action)
        # GRUNT atk 5 vs HUMAN def 2
        assert player.stats.hp == 27

    def test_distant_player_is_approached(self):
        arena = Arena()
        grunt = arena.add(5, 8, facing=Direction.NORTH)
        arena.add(5, 5, race=Race.HUMAN, is_player=True)
        grunt.update_los(arena.world.grid)
        action = _brain(arena).decide(grunt, arena.world)
        assert action == Action.move(Direction.NORTH)
        arena.loop.perform_action(grunt, action)
        assert grunt.p == Point(5, 7)

    def test_wandering_never_melees(self):
        arena = Arena()
        a = arena.add(5, 5)
        arena.add(5, 4)
        a.update_los(arena.world.grid)
        brain = _brain(arena)
        for tick in range(30):
            arena.world.tick = tick
            action = brain.decide(a, arena.world)
            assert action is None or action.verb in (ActionType.MOVE, ActionType.TURN)

    def test_wandering_does_not_walk_into_walls(self):
        arena = Arena()
        a = arena.add(5, 5, facing=Direction.NORTH)
        arena.wall(5, 4)
        a.update_los(arena.world.grid)
        brain = _brain(arena)
        for tick in range(30):
            arena.world.tick = tick
            action = brain.decide(a, arena.world)
            assert action != Action.move(Relative.FORWARD)

    def test_decisions_are_deterministic(self):
        arena = Arena()
        a = arena.add(5, 5)
        a.update_los(arena.world.grid)
        first = [_brain(arena).decide(a, arena.world) for _ in range(5)]
        assert len(set(first)) == 1

    def test_turn_side_independent_of_next_wander_roll(self):
        arena = Arena(wander_move_chance=0.0, wander_turn_chance=0.5)
        a = arena.add(5, 5)
        a.update_los(arena.world.grid)
        brain = _brain(arena)
        decisions = []
        for tick in range(201):
            arena.world.tick = tick
            decisions.append(brain.decide(a, arena.world))

        pairs = [
            (decisions[t].direction == Direction(1), decisions[t + 1] is not None)
            for t in range(200)
            if decisions[t] is not None
        ]
        assert pairs
        assert all(d.verb == ActionType.TURN for d in decisions if d is not None)
        assert any(clockwise != turns_next for clockwise, turns_next in pairs)


class TestPlayerInput:
    def test_one_command_per_tick(self):
        arena = Arena()
        pid = arena.loop.spawn(arena.loop.create_actor(Position(Point(5, 5), Direction.NORTH), True, Race.HUMAN))
        arena.world.player_id = pid
        player = arena.loop.player
        arena.loop.player_input.extend([Action.move(), Action.turn(Direction.SOUTH)])
        arena.tick()
        assert player.p == Point(5, 4)
        assert player.pos.dir == Direction.NORTH
        arena.tick()
        assert player.pos.dir == Direction.SOUTH
        assert arena.loop.player_input.empty

    def test_empty_queue_waits(self):
        arena = Arena()
        pid = arena.loop.spawn_random(True, Race.HUMAN)
        player = arena.world.resolve(pid)
        before = player.pos
        arena.tick()
        assert player.pos == before
        assert player.last_action is None
