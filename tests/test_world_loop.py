"""Tests for spawning and the per-tick advance.

Covers:
- spawn success / rejection without side effects
- registry order as iteration order, one action per actor per tick
- actors spawned mid-tick act from the next tick
- perception refresh for monsters vs. the player
- stop conditions of tick_once
"""

import sys
import os
import threading

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from hexsim.actions.base import Action
from hexsim.config import SimulationConfig
from hexsim.core.enums import Direction, Race, Terrain
from hexsim.core.exceptions import SpawnExhaustedError
from hexsim.core.models import Point, Position
from hexsim.engine.world_loop import WorldLoop
from tests.helpers.arena import Arena, Script


class TestConstruction:
    def test_default_world(self):
        loop = WorldLoop.new()
        assert (loop.grid.width, loop.grid.height) == (100, 100)
        assert all(loop.grid.get(p) == Terrain.FLOOR for p in loop.grid.points())
        assert loop.world.registry == []
        assert loop.player is None


class TestSpawn:
    def test_spawn_records_everything(self):
        arena = Arena()
        actor = arena.loop.create_actor(Position(Point(3, 3), Direction.SOUTH), False, Race.SCOUT)
        aid = arena.loop.spawn(actor)
        assert aid == actor.id == 1
        assert arena.occupant(3, 3) == aid
        assert arena.world.registry == [aid]
        assert arena.world.resolve(aid) is actor

    def test_spawn_on_impassable_is_discarded(self):
        arena = Arena()
        arena.wall(3, 3)
        before = arena.snapshot()
        actor = arena.loop.create_actor(Position(Point(3, 3)), False, Race.SCOUT)
        assert arena.loop.spawn(actor) is None
        assert actor.id == 0
        assert arena.snapshot() == before
        # No id was consumed by the failed attempt.
        other = arena.loop.create_actor(Position(Point(4, 4)), False, Race.SCOUT)
        assert arena.loop.spawn(other) == 1

    def test_spawn_on_occupied_is_discarded(self):
        arena = Arena()
        first = arena.add(3, 3)
        intruder = arena.loop.create_actor(Position(Point(3, 3)), False, Race.HEAVY)
        assert arena.loop.spawn(intruder) is None
        assert arena.occupant(3, 3) == first.id
        assert arena.world.registry == [first.id]

    def test_spawn_position_is_wrapped(self):
        arena = Arena()
        actor = arena.loop.create_actor(Position(Point(12, -1)), False, Race.GRUNT)
        arena.loop.spawn(actor)
        assert actor.p == Point(2, 9)
        assert arena.occupant(2, 9) == actor.id

    def test_spawn_random_lands_on_free_tile(self):
        arena = Arena()
        for p in arena.world.grid.points():
            if p != Point(6, 2):
                arena.wall(p.x, p.y)
        aid = arena.loop.spawn_random(False, Race.GRUNT)
        assert arena.world.resolve(aid).p == Point(6, 2)

    def test_spawn_random_controller_matches_role(self):
        arena = Arena()
        pid = arena.loop.spawn_random(True, Race.HUMAN)
        mid = arena.loop.spawn_random(False, Race.SCOUT)
        assert arena.world.resolve(pid).controller is arena.loop.player_input
        assert arena.world.resolve(mid).controller is not arena.loop.player_input


class TestSaturatedSpawn:
    def test_unbounded_retry_keeps_waiting(self):
        arena = Arena(3, 3)
        for p in arena.world.grid.points():
            arena.wall(p.x, p.y)
        before = arena.snapshot()
        landed: list[int] = []
        worker = threading.Thread(
            target=lambda: landed.append(arena.loop.spawn_random(False, Race.SCOUT)),
            daemon=True,
        )
        worker.start()
        worker.join(timeout=0.5)

        assert worker.is_alive()
        assert landed == []
        assert arena.world.registry == []
        assert arena.snapshot() == before

        # Opening a single tile lets the pending retry loop finish.
        arena.wall(1, 1, Terrain.FLOOR)
        worker.join(timeout=10)
        assert not worker.is_alive()
        assert arena.world.resolve(landed[0]).p == Point(1, 1)

    def test_all_impassable(self):
        arena = Arena(3, 3, spawn_attempt_limit=50)
        for p in arena.world.grid.points():
            arena.wall(p.x, p.y)
        with pytest.raises(SpawnExhaustedError) as info:
            arena.loop.spawn_random(False, Race.SCOUT)
        assert info.value.attempts == 50
        assert arena.world.registry == []

    def test_all_occupied(self):
        arena = Arena(2, 2, spawn_attempt_limit=40)
        for p in list(arena.world.grid.points()):
            arena.add(p.x, p.y)
        before = arena.snapshot()
        with pytest.raises(SpawnExhaustedError):
            arena.loop.spawn_random(False, Race.SCOUT)
        assert arena.snapshot() == before


class TestTickOrder:
    def test_registry_order_is_iteration_order(self):
        arena = Arena()
        order: list[int] = []

        def record(actor, world):
            order.append(actor.id)

        actors = [arena.add(x, 5) for x in (7, 1, 4)]
        for a in actors:
            a.controller = Script(on_decide=record)
        arena.tick()
        assert order == [a.id for a in actors]

    def test_each_actor_acts_once_per_tick(self):
        arena = Arena()
        a = arena.add(5, 5, script=[Action.move(), Action.move(), Action.move()])
        arena.tick()
        assert a.p == Point(5, 4)
        arena.tick(2)
        assert a.p == Point(5, 2)
        assert a.controller.calls == [0, 1, 2]

    def test_spawned_mid_tick_acts_next_tick(self):
        arena = Arena()
        newborn: list = []

        def spawn_once(actor, world):
            if newborn:
                return
            child = arena.loop.create_actor(Position(Point(8, 8)), False, Race.SCOUT)
            child.controller = Script()
            arena.loop.spawn(child)
            newborn.append(child)

        parent = arena.add(2, 2)
        parent.controller = Script(on_decide=spawn_once)
        arena.tick()
        child = newborn[0]
        assert child.id in arena.world.registry
        assert child.controller.calls == []
        arena.tick()
        assert child.controller.calls == [1]

    def test_dead_actor_is_skipped_and_pruned(self):
        arena = Arena()
        corpse = arena.add(5, 5, script=[Action.move()])
        corpse.stats.hp = 0
        arena.tick()
        assert corpse.controller.calls == []
        assert corpse.id not in arena.world.registry

    def test_action_done_clears_pending(self):
        arena = Arena()
        a = arena.add(5, 5, script=[Action.turn(1)])
        arena.tick()
        assert a.pending_action is None
        assert a.last_action == Action.turn(1)

    def test_tick_counter_advances(self):
        arena = Arena()
        arena.tick(3)
        assert arena.world.tick == 3


class TestPerceptionRefresh:
    def test_monster_refreshed_player_not(self):
        arena = Arena()
        monster = arena.add(2, 2)
        player = arena.add(7, 7, race=Race.HUMAN, is_player=True)
        arena.tick()
        assert Point(2, 2) in monster.los
        assert not monster.needs_los_refresh
        assert player.los == frozenset()
        assert player.needs_los_refresh

    def test_update_player_los(self):
        arena = Arena()
        player = arena.add(7, 7, race=Race.HUMAN, is_player=True)
        arena.loop.update_player_los()
        assert Point(7, 7) in player.los
        assert not player.needs_los_refresh

    def test_update_player_los_without_player(self):
        arena = Arena()
        arena.loop.update_player_los()
        player = arena.add(7, 7, race=Race.HUMAN, is_player=True)
        arena.world.release(player.p)
        arena.loop.update_player_los()
        assert arena.loop.player is None

    def test_moving_marks_los_stale(self):
        arena = Arena()
        monster = arena.add(2, 2, script=[None, Action.move()])
        arena.tick()
        assert not monster.needs_los_refresh
        arena.tick()
        assert monster.needs_los_refresh


class TestTickOnce:
    def test_stops_at_max_ticks(self):
        arena = Arena(max_ticks=2)
        arena.add(5, 5)
        assert arena.loop.tick_once()
        assert arena.loop.tick_once()
        assert not arena.loop.tick_once()
        assert arena.world.tick == 2

    def test_stops_when_player_dies(self):
        arena = Arena()
        player = arena.add(5, 5, race=Race.HUMAN, is_player=True)
        arena.add(1, 1)
        assert arena.loop.tick_once()
        arena.world.release(player.p)
        assert not arena.loop.tick_once()

    def test_stops_when_player_dies_from_counter(self):
        arena = Arena()
        player = arena.add(5, 5, race=Race.HUMAN, is_player=True, hp=1)
        arena.add(5, 4, race=Race.HEAVY)
        arena.loop.perform_action(player, Action.melee())
        # The corpse keeps its tile, so the player slot still resolves.
        assert arena.loop.player is player
        assert not arena.loop.tick_once()

    def test_run_honours_max_ticks(self):
        arena = Arena(max_ticks=5)
        arena.add(5, 5)
        arena.loop.run()
        assert arena.world.tick == 5
