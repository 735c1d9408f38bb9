"""
Tests for the pointer motion field
"""

import pytest
import pygame
from smokefield.core.constants import HERO_SMOKE, SPARKLE, CURSOR_SMOKE
from smokefield.core.pointer import PointerTracker
from smokefield.simulation.motion_field import MotionField
from smokefield.simulation.particle import Particle


@pytest.fixture
def pointer():
    tracker = PointerTracker(pygame.Rect(0, 0, 800, 600))
    tracker.move(400, 300)
    return tracker


@pytest.fixture
def field(pointer):
    return MotionField(pointer)


def still(spec, rng, x, y):
    p = Particle(spec, rng, 800, 600, origin=(x, y))
    p.x, p.y = x, y
    p.vx = p.vy = 0.0
    return p


def test_smoke_is_repelled(field, rng):
    p = still(HERO_SMOKE, rng, 450, 300)
    field.apply(p)
    assert p.vx > 0
    assert p.vy == pytest.approx(0.0)


def test_repulsion_scales_with_distance(field, rng):
    near = still(HERO_SMOKE, rng, 420, 300)
    far = still(HERO_SMOKE, rng, 540, 300)
    field.apply(near)
    field.apply(far)
    assert near.vx > far.vx > 0
    assert near.vx == pytest.approx((1 - 20 / 160) * 0.22)


def test_smoke_is_dragged_along_pointer_motion(pointer, field, rng):
    pointer.vx, pointer.vy = 20.0, 0.0
    # Directly below the pointer, so repulsion is purely vertical
    p = still(HERO_SMOKE, rng, 400, 380)
    field.apply(p)
    falloff = 1 - 80 / 160
    assert p.vx == pytest.approx(20.0 * falloff * 0.05)
    assert p.vy == pytest.approx(falloff * 0.22)


def test_sparkle_is_attracted(field, rng):
    p = still(SPARKLE, rng, 450, 300)
    field.apply(p)
    assert p.vx < 0
    assert p.vx == pytest.approx(-(1 - 50 / 100) * 0.008)


def test_no_force_outside_radius(field, rng):
    smoke = still(HERO_SMOKE, rng, 400 + 161, 300)
    sparkle = still(SPARKLE, rng, 400 + 101, 300)
    field.apply(smoke)
    field.apply(sparkle)
    assert (smoke.vx, smoke.vy) == (0.0, 0.0)
    assert (sparkle.vx, sparkle.vy) == (0.0, 0.0)


def test_no_force_at_pointer_position(field, rng):
    p = still(HERO_SMOKE, rng, 400, 300)
    field.apply(p)
    assert (p.vx, p.vy) == (0.0, 0.0)


def test_inactive_pointer_exerts_nothing(pointer, field, rng):
    pointer.leave()
    p = still(HERO_SMOKE, rng, 450, 300)
    field.apply(p)
    assert (p.vx, p.vy) == (0.0, 0.0)


def test_trail_smoke_ignores_field(field, rng):
    p = still(CURSOR_SMOKE, rng, 420, 300)
    field.apply(p)
    assert (p.vx, p.vy) == (0.0, 0.0)


def test_force_is_additive(field, rng):
    p = still(HERO_SMOKE, rng, 450, 300)
    p.vx = 1.0
    field.apply(p)
    assert p.vx > 1.0
