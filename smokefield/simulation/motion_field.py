"""
Pointer-driven force field applied to particles each tick
"""

import math

from smokefield.core.constants import Interaction, FORCE_EPSILON
from smokefield.core.pointer import PointerTracker


class MotionField:
    """
    Adds the pointer's push or pull to a particle's velocity.

    Smoke variants are repelled and dragged along the pointer's motion;
    sparkles are weakly attracted. Coefficients come from each particle's spec.
    """

    def __init__(self, pointer: PointerTracker, epsilon: float = FORCE_EPSILON):
        self.pointer = pointer
        self.epsilon = epsilon

    def apply(self, particle):
        spec = particle.spec
        if spec.interaction is Interaction.NONE or not self.pointer.active:
            return

        dx = particle.x - self.pointer.x
        dy = particle.y - self.pointer.y
        dist = math.hypot(dx, dy)
        if dist >= spec.force_radius or dist <= self.epsilon:
            return

        falloff = 1.0 - dist / spec.force_radius

        if spec.interaction is Interaction.REPEL:
            particle.vx += (dx / dist) * falloff * spec.force_strength
            particle.vy += (dy / dist) * falloff * spec.force_strength
            # Carry smoke along with the pointer's motion
            particle.vx += self.pointer.vx * falloff * spec.drag
            particle.vy += self.pointer.vy * falloff * spec.drag
        elif spec.interaction is Interaction.ATTRACT:
            particle.vx -= (dx / dist) * falloff * spec.force_strength
            particle.vy -= (dy / dist) * falloff * spec.force_strength
