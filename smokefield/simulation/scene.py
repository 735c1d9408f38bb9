"""
Smokefield - Scene
Simulation state for one drawing surface: pools in layer order, spawners,
the pointer and the motion field.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from smokefield.core.constants import (
    HERO_SMOKE, SPARKLE, CURSOR_SMOKE, BACKDROP_SMOKE, BACKDROP_PUFF,
    HERO_SMOKE_COUNT, SPARKLE_COUNT, CURSOR_SMOKE_CAP,
    BACKDROP_SMOKE_COUNT, BACKDROP_PUFF_CAP, BACKDROP_PUFF_TRIM
)
from smokefield.core.logger import get_logger
from smokefield.core.pointer import PointerTracker
from smokefield.simulation.motion_field import MotionField
from smokefield.simulation.pools import FixedPool, GrowablePool
from smokefield.simulation.spawners import SpeedSpawner, IntervalSpawner

Pool = Union[FixedPool, GrowablePool]


@dataclass
class Layer:
    """A group of pools drawn together, optionally through the blur pass."""
    name: str
    pools: List[Pool] = field(default_factory=list)
    blurred: bool = False


class Scene:
    """
    Owns every particle for one surface.

    step() updates all pools before anything is drawn; the renderer reads
    layers afterwards in order (background first, foreground last).
    """

    def __init__(self, name: str, pointer: PointerTracker, layers: List[Layer],
                 spawners: Optional[list] = None, rng: Optional[random.Random] = None):
        self.name = name
        self.pointer = pointer
        self.field = MotionField(pointer)
        self.layers = layers
        self.spawners = spawners or []
        self.rng = rng or random.Random()
        self.width = 0
        self.height = 0
        self.frame = 0

    @property
    def pools(self) -> List[Pool]:
        return [pool for layer in self.layers for pool in layer.pools]

    def reseed(self, width: int, height: int, spread: bool = True):
        """Resize and repopulate every pool."""
        self.width = width
        self.height = height
        for pool in self.pools:
            pool.seed(width, height, spread=spread)
        get_logger().debug(f"Scene '{self.name}' seeded at {width}x{height}")

    def step(self):
        """Advance every particle one tick, then spawn from the pointer."""
        for pool in self.pools:
            pool.update(self.field)

        # New trail particles are drawn at their birth state this frame
        for spawner in self.spawners:
            spawner.maybe_spawn()

        # Velocity kick fades once consumed
        self.pointer.decay()
        self.frame += 1

    def population(self) -> Dict[str, int]:
        return {pool.spec.name: len(pool) for pool in self.pools}


def build_hero_scene(pointer: PointerTracker, rng: Optional[random.Random] = None,
                     smoke_count: int = HERO_SMOKE_COUNT,
                     sparkle_count: int = SPARKLE_COUNT,
                     trail_cap: int = CURSOR_SMOKE_CAP) -> Scene:
    """Repelled smoke and cursor trail behind blur, sharp sparkles on top."""
    rng = rng or random.Random()
    smoke = FixedPool(HERO_SMOKE, smoke_count, rng)
    trail = GrowablePool(CURSOR_SMOKE, trail_cap, rng)
    sparkles = FixedPool(SPARKLE, sparkle_count, rng)

    layers = [
        Layer("ambient", [smoke], blurred=True),
        Layer("trail", [trail], blurred=True),
        Layer("sparkles", [sparkles], blurred=False),
    ]
    return Scene("hero", pointer, layers, [SpeedSpawner(trail, pointer)], rng)


def build_backdrop_scene(pointer: PointerTracker, rng: Optional[random.Random] = None,
                         smoke_count: int = BACKDROP_SMOKE_COUNT,
                         puff_cap: int = BACKDROP_PUFF_CAP,
                         puff_trim: int = BACKDROP_PUFF_TRIM) -> Scene:
    """Page-wide rising smoke with frame-gated pointer puffs."""
    rng = rng or random.Random()
    smoke = FixedPool(BACKDROP_SMOKE, smoke_count, rng)
    puffs = GrowablePool(BACKDROP_PUFF, puff_cap, rng, trim_batch=puff_trim)

    layers = [
        Layer("ambient", [smoke]),
        Layer("trail", [puffs]),
    ]
    return Scene("backdrop", pointer, layers, [IntervalSpawner(puffs, pointer)], rng)
