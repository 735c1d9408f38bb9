"""
Smokefield - Particle
One particle class for every variant; behaviour comes from its ParticleSpec.
"""

import math
import random
from typing import Optional, Tuple

import pygame

from smokefield.core.constants import ParticleSpec, Growth, Envelope, Shape, MIN_DRAW_ALPHA
from smokefield.graphics import gradients
from smokefield.utils.rng import sample, jitter, pick


class Particle:
    """
    A self-respawning smoke blob, trail puff or sparkle.

    State is sampled at birth from the variant's ParticleSpec and then
    evolved one tick at a time by update(), which reports liveness.
    """

    def __init__(self, spec: ParticleSpec, rng: random.Random,
                 width: float, height: float, spread: bool = False,
                 origin: Optional[Tuple[float, float]] = None,
                 pointer_velocity: Tuple[float, float] = (0.0, 0.0)):
        self.spec = spec
        self.rng = rng
        self.birth(width, height, spread, origin, pointer_velocity)

    def birth(self, width: float, height: float, spread: bool = False,
              origin: Optional[Tuple[float, float]] = None,
              pointer_velocity: Tuple[float, float] = (0.0, 0.0)):
        """(Re)initialise every birth-time parameter in place."""
        spec = self.spec
        rng = self.rng

        # Life
        self.max_life = max(1, int(sample(rng, spec.life_range)))
        if spread:
            self.life = int(rng.random() * self.max_life * spec.spread_life_fraction)
        else:
            self.life = 0

        # Position
        if origin is not None:
            self.x = origin[0] + jitter(rng, spec.spawn_jitter)
            self.y = origin[1] + jitter(rng, spec.spawn_jitter)
        elif spread:
            margin = spec.spread_y_margin
            self.x = rng.random() * width
            self.y = rng.random() * (height + 2 * margin) - margin
        else:
            # Below the bottom edge so it drifts into view
            self.x = rng.random() * width
            self.y = height + sample(rng, spec.spawn_offset_range)

        # Velocity
        pvx, pvy = pointer_velocity
        self.vx = jitter(rng, spec.vx_spread) + pvx * spec.pointer_inherit
        self.vy = -sample(rng, spec.vy_range) + pvy * spec.pointer_inherit

        # Orientation / turbulence phase
        self.angle = rng.random() * math.pi * 2
        self.spin = jitter(rng, spec.spin_spread)
        self.scale_y = sample(rng, spec.scale_y_range)

        # Look
        self.base_alpha = sample(rng, spec.alpha_range)
        self.color = self._sample_color()
        self.sprite = None
        if spec.shape is Shape.GRADIENT:
            self.sprite = gradients.GradientSprite(
                self.color, spec.gradient_mid, spec.gradient_mid_alpha, self.scale_y
            )

        # Radius
        self.r0 = sample(rng, spec.radius_range)
        max_r = sample(rng, spec.max_radius_range)
        if spec.max_radius_relative:
            max_r += self.r0
        self.max_r = max(max_r, self.r0)
        self.r = self._radius_at(self.life)

        self.alpha = self.opacity()

    def _sample_color(self) -> Tuple[int, int, int]:
        spec = self.spec
        if spec.hsl_ranges is not None:
            hue, sat, light = (sample(self.rng, bounds) for bounds in spec.hsl_ranges)
            color = pygame.Color(0, 0, 0)
            color.hsla = (hue % 360, sat, light, 100)
            return (color.r, color.g, color.b)
        return tuple(pick(self.rng, spec.palette))

    def _radius_at(self, life: int) -> float:
        spec = self.spec
        if spec.growth is Growth.RAMP:
            t = life / self.max_life
            return self.r0 + (self.max_r - self.r0) * min(t * spec.growth_rate, 1.0)
        if spec.growth is Growth.STEP:
            return min(self.r0 + life * spec.growth_rate, self.max_r)
        return self.r0

    @property
    def t(self) -> float:
        """Elapsed-life fraction."""
        return self.life / self.max_life

    def opacity(self) -> float:
        """Opacity envelope over the life fraction, in [0, base_alpha]."""
        spec = self.spec
        t = min(max(self.t, 0.0), 1.0)

        if spec.envelope is Envelope.SINE:
            return self.base_alpha * math.sin(t * math.pi)

        if t < spec.fade_in:
            return self.base_alpha * (t / spec.fade_in)
        if t > spec.fade_out_start:
            return self.base_alpha * (1.0 - t) / (1.0 - spec.fade_out_start)
        return self.base_alpha

    def update(self, field=None) -> bool:
        """Advance one tick. Returns False once the particle is dead."""
        spec = self.spec
        self.life += 1

        # Turbulence
        if spec.turbulence_amp:
            self.vx += math.sin(self.life * spec.turbulence_freq + self.angle) * spec.turbulence_amp
        self.angle += self.spin
        self.vx *= spec.damping[0]
        self.vy *= spec.damping[1]
        self.vy -= spec.lift

        if field is not None:
            field.apply(self)

        self.x += self.vx
        self.y += self.vy

        if spec.growth is Growth.STEP:
            self.r = min(self.r + spec.growth_rate, self.max_r)
        elif spec.growth is Growth.RAMP:
            self.r = max(self.r, self._radius_at(self.life))

        self.alpha = self.opacity()
        return self.is_alive()

    def is_alive(self) -> bool:
        if self.life >= self.max_life:
            return False
        spec = self.spec
        if spec.top_margin is not None:
            if self.y < -(self.max_r * spec.radius_bound + spec.top_margin):
                return False
        return True

    def draw(self, surface: pygame.Surface, scale: float = 1.0):
        """Draw onto surface, whose pixels are `scale` times the simulation's."""
        if self.alpha <= MIN_DRAW_ALPHA:
            return
        x, y, r = self.x * scale, self.y * scale, self.r * scale
        if self.sprite is None:
            gradients.blit_dot(surface, x, y, r, self.color, self.alpha)
        else:
            self.sprite.draw(surface, x, y, r, self.alpha, self.angle)

    def __repr__(self):
        return (f"Particle({self.spec.name}, x={self.x:.1f}, y={self.y:.1f}, "
                f"r={self.r:.1f}, life={self.life}/{self.max_life})")
