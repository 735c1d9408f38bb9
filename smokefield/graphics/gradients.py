"""
Radial gradient sprites and soft blur helpers
"""

import math
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np
import pygame

# Pre-rotated orientations per full turn
ROTATION_STEPS = 24


@lru_cache(maxsize=128)
def gradient_mask(radius: int, mid: float = 0.45, mid_alpha: float = 0.45) -> pygame.Surface:
    """
    White radial sprite whose alpha falls 1 -> mid_alpha -> 0 across the
    stops (0, mid, 1) of the radius. Cached; callers must copy before tinting.
    """
    size = radius * 2
    coords = np.arange(size, dtype=np.float32) + 0.5 - radius
    dist = np.sqrt(coords[:, None] ** 2 + coords[None, :] ** 2) / radius
    alpha = np.interp(dist, [0.0, mid, 1.0], [1.0, mid_alpha, 0.0], right=0.0)

    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    surf.fill((255, 255, 255, 0))
    alpha_view = pygame.surfarray.pixels_alpha(surf)
    alpha_view[...] = (alpha * 255).astype(np.uint8)
    del alpha_view  # unlock the surface
    return surf


def quantize_radius(r: float) -> int:
    """Snap a radius to a bucket roughly 3-6% wide so growing sprites are reused."""
    radius = max(1, int(round(r)))
    step = 1 << max(0, radius.bit_length() - 5)
    return max(1, radius - radius % step)


def quantize_angle(angle: float) -> int:
    return int(round(angle / (2 * math.pi) * ROTATION_STEPS)) % ROTATION_STEPS


def tinted_gradient(radius: int, color: Tuple[int, int, int],
                    mid: float = 0.45, mid_alpha: float = 0.45,
                    scale_y: float = 1.0, turn: int = 0) -> pygame.Surface:
    """Build a tinted, flattened and rotated gradient sprite at full opacity."""
    sprite = gradient_mask(radius, round(mid, 2), round(mid_alpha, 2)).copy()
    sprite.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)

    if scale_y != 1.0:
        size = radius * 2
        sprite = pygame.transform.smoothscale(sprite, (size, max(1, int(size * scale_y))))
        if turn:
            # Canvas angles run clockwise in y-down space
            sprite = pygame.transform.rotate(sprite, -turn * 360.0 / ROTATION_STEPS)
    return sprite


class GradientSprite:
    """
    Tinted gradient owned by one particle.

    Colour and flattening are fixed for the particle's life, so the sprite
    is rebuilt only when the quantized radius or orientation changes. The
    per-frame opacity is applied as surface alpha at blit time.
    """

    def __init__(self, color: Tuple[int, int, int], mid: float = 0.45,
                 mid_alpha: float = 0.45, scale_y: float = 1.0):
        self.color = color
        self.mid = mid
        self.mid_alpha = mid_alpha
        self.scale_y = scale_y
        self.key: Optional[Tuple[int, int]] = None
        self.surface: Optional[pygame.Surface] = None
        self.builds = 0

    def draw(self, target: pygame.Surface, x: float, y: float, r: float,
             alpha: float, angle: float = 0.0):
        turn = quantize_angle(angle) if self.scale_y != 1.0 else 0
        key = (quantize_radius(r), turn)
        if key != self.key:
            self.surface = tinted_gradient(key[0], self.color, self.mid, self.mid_alpha,
                                           self.scale_y, turn)
            self.key = key
            self.builds += 1

        self.surface.set_alpha(int(round(alpha * 255)))
        target.blit(self.surface, self.surface.get_rect(center=(int(x), int(y))))


def blit_dot(surface: pygame.Surface, x: float, y: float, r: float,
             color: Tuple[int, int, int], alpha: float):
    """Draw a small solid translucent circle."""
    radius = max(1, int(round(r)))
    size = radius * 2 + 1
    dot = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(dot, (*color, int(round(alpha * 255))), (radius, radius), radius)
    surface.blit(dot, (int(x) - radius, int(y) - radius))


def blur_factor(radius: int) -> int:
    """Downsampling factor that approximates a blur of the given pixel radius."""
    if radius <= 1:
        return 1
    return radius // 2 + 1
