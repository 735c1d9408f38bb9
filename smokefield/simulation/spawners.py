"""
Cursor-trail spawners
"""

from smokefield.core.constants import (
    TRAIL_MIN_SPEED, TRAIL_SPEED_PER_PARTICLE, TRAIL_MAX_PER_FRAME,
    PUFF_FRAME_INTERVAL, PUFF_BATCH
)
from smokefield.core.pointer import PointerTracker
from smokefield.simulation.pools import GrowablePool


class SpeedSpawner:
    """Spawns trail puffs in proportion to pointer speed."""

    def __init__(self, pool: GrowablePool, pointer: PointerTracker,
                 min_speed: float = TRAIL_MIN_SPEED,
                 speed_per_particle: float = TRAIL_SPEED_PER_PARTICLE,
                 max_per_frame: int = TRAIL_MAX_PER_FRAME):
        self.pool = pool
        self.pointer = pointer
        self.min_speed = min_speed
        self.speed_per_particle = speed_per_particle
        self.max_per_frame = max_per_frame

    def maybe_spawn(self) -> int:
        """Returns the number of particles added this frame."""
        pointer = self.pointer
        speed = pointer.speed
        if speed < self.min_speed or not pointer.active or pointer.x < 0:
            return 0

        count = min(int(speed // self.speed_per_particle), self.max_per_frame)
        spawned = 0
        for _ in range(count):
            if self.pool.spawn(pointer.position, pointer.velocity) is not None:
                spawned += 1
        return spawned


class IntervalSpawner:
    """Spawns a fixed batch every N frames while the pointer is active."""

    def __init__(self, pool: GrowablePool, pointer: PointerTracker,
                 interval: int = PUFF_FRAME_INTERVAL, batch: int = PUFF_BATCH):
        self.pool = pool
        self.pointer = pointer
        self.interval = interval
        self.batch = batch
        self.tick = 0

    def maybe_spawn(self) -> int:
        if not self.pointer.active:
            return 0
        self.tick += 1
        if self.tick % self.interval != 0:
            return 0

        spawned = 0
        for _ in range(self.batch):
            if self.pool.spawn(self.pointer.position) is not None:
                spawned += 1
        return spawned
