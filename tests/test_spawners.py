"""
Tests for cursor-trail spawners
"""

import pytest
import pygame
from smokefield.core.constants import CURSOR_SMOKE, BACKDROP_PUFF
from smokefield.core.pointer import PointerTracker
from smokefield.simulation.pools import GrowablePool
from smokefield.simulation.scene import build_hero_scene
from smokefield.simulation.spawners import SpeedSpawner, IntervalSpawner


@pytest.fixture
def pointer():
    return PointerTracker(pygame.Rect(0, 0, 800, 600))


@pytest.fixture
def trail(rng):
    pool = GrowablePool(CURSOR_SMOKE, 12, rng)
    pool.seed(800, 600)
    return pool


def test_inactive_pointer_spawns_nothing(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.vx = 50.0
    assert spawner.maybe_spawn() == 0
    assert len(trail) == 0


def test_slow_pointer_spawns_nothing(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.move(100, 100)
    pointer.move(102, 100)  # speed 1.2
    assert spawner.maybe_spawn() == 0


def test_spawn_count_follows_speed(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.move(100, 100)
    pointer.move(115, 100)  # speed 9 -> 2 particles
    assert spawner.maybe_spawn() == 2


def test_spawn_count_capped_per_frame(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.move(100, 100)
    pointer.move(300, 100)
    assert spawner.maybe_spawn() == 3


def test_trail_never_exceeds_cap(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.move(100, 100)
    for i in range(20):
        pointer.move(100 + (i + 1) * 60, 100)
        spawner.maybe_spawn()
        assert len(trail) <= 12
    assert len(trail) == 12


def test_trail_particles_left_behind(pointer, trail):
    spawner = SpeedSpawner(trail, pointer)
    pointer.move(100, 300)
    pointer.move(200, 300)
    spawner.maybe_spawn()
    for p in trail.particles:
        assert p.vx < 0
        assert abs(p.x - 200) <= 15


def test_interval_spawner_gates_by_frame(pointer, rng):
    pool = GrowablePool(BACKDROP_PUFF, 80, rng, trim_batch=5)
    pool.seed(800, 600)
    spawner = IntervalSpawner(pool, pointer, interval=4, batch=1)
    pointer.move(400, 300)

    spawned = [spawner.maybe_spawn() for _ in range(8)]
    assert spawned == [0, 0, 0, 1, 0, 0, 0, 1]
    assert len(pool) == 2


def test_interval_spawner_respects_cap(pointer, rng):
    pool = GrowablePool(BACKDROP_PUFF, 80, rng, trim_batch=5)
    pool.seed(800, 600)
    spawner = IntervalSpawner(pool, pointer, interval=1, batch=3)
    pointer.move(400, 300)
    for _ in range(100):
        spawner.maybe_spawn()
        assert len(pool) <= 80


def test_interval_spawner_idle_without_pointer(pointer, rng):
    pool = GrowablePool(BACKDROP_PUFF, 80, rng, trim_batch=5)
    pool.seed(800, 600)
    spawner = IntervalSpawner(pool, pointer)
    for _ in range(12):
        spawner.maybe_spawn()
    assert len(pool) == 0
    assert spawner.tick == 0


def test_scene_spawns_after_updating_pools(pointer, rng):
    scene = build_hero_scene(pointer, rng)
    scene.reseed(800, 600)
    pointer.move(100, 100)
    pointer.move(140, 100)

    scene.step()
    trail = scene.layers[1].pools[0]
    assert len(trail) == 3
    assert all(p.life == 0 for p in trail.particles)
    assert pointer.vx == pytest.approx(40 * 0.6 * 0.82)

    scene.step()
    assert all(p.life >= 1 for p in trail.particles[:3])
