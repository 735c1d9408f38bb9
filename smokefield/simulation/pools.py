"""
Particle pools: fixed steady-state and bounded growable
"""

import random
from typing import List, Optional, Tuple

import pygame

from smokefield.core.constants import ParticleSpec
from smokefield.simulation.particle import Particle


class FixedPool:
    """Constant-size pool; dead particles are reborn in their slot."""

    def __init__(self, spec: ParticleSpec, size: int, rng: random.Random):
        self.spec = spec
        self.size = size
        self.rng = rng
        self.width = 0.0
        self.height = 0.0
        self.particles: List[Particle] = []

    def seed(self, width: float, height: float, spread: bool = True):
        """Replace the whole population for a surface of the given size."""
        self.width = width
        self.height = height
        self.particles = [
            Particle(self.spec, self.rng, width, height, spread=spread)
            for _ in range(self.size)
        ]

    def update(self, field=None):
        for p in self.particles:
            if not p.update(field):
                p.birth(self.width, self.height, spread=False)

    def draw(self, surface: pygame.Surface, scale: float = 1.0):
        for p in self.particles:
            p.draw(surface, scale)

    def __len__(self):
        return len(self.particles)


class GrowablePool:
    """
    Pool that grows on spawn and shrinks as particles die.

    With trim_batch set, exceeding the cap drops that many of the oldest
    entries; otherwise spawns are refused once the cap is reached.
    """

    def __init__(self, spec: ParticleSpec, cap: int, rng: random.Random,
                 trim_batch: int = 0):
        self.spec = spec
        self.cap = cap
        self.trim_batch = trim_batch
        self.rng = rng
        self.width = 0.0
        self.height = 0.0
        self.particles: List[Particle] = []

    def seed(self, width: float, height: float, spread: bool = True):
        self.width = width
        self.height = height
        self.particles = []

    def spawn(self, origin: Tuple[float, float],
              pointer_velocity: Tuple[float, float] = (0.0, 0.0)) -> Optional[Particle]:
        """Append one particle at origin. Returns None if the pool is full."""
        if not self.trim_batch and len(self.particles) >= self.cap:
            return None

        p = Particle(self.spec, self.rng, self.width, self.height,
                     origin=origin, pointer_velocity=pointer_velocity)
        self.particles.append(p)

        if len(self.particles) > self.cap:
            del self.particles[:self.trim_batch]
        return p

    def update(self, field=None):
        # Filter alive
        self.particles = [p for p in self.particles if p.update(field)]

    def draw(self, surface: pygame.Surface, scale: float = 1.0):
        for p in self.particles:
            p.draw(surface, scale)

    def __len__(self):
        return len(self.particles)
