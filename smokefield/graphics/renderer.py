"""
Smokefield - Renderer
Clears the surface and composites a scene's layers, blurring the ambient ones
"""

from typing import Dict, Optional, Tuple

import pygame

from smokefield.core.constants import BLUR_RADIUS
from smokefield.graphics.gradients import blur_factor
from smokefield.simulation.scene import Layer, Scene


class Renderer:
    """
    Draws one Scene onto one surface.

    Layers below full resolution are drawn into a shared offscreen layer
    and smoothscaled up onto the target. Blurred layers are drawn at
    1 / blur_factor of the resolution, so the upscale is the blur. Sharp
    layers at full resolution go straight onto the target.
    """

    def __init__(self, blur_radius: int = BLUR_RADIUS,
                 background: Optional[Tuple[int, int, int]] = None,
                 resolution: float = 1.0):
        self.blur_radius = blur_radius
        self.background = background
        self.resolution = resolution
        self._offscreens: Dict[float, pygame.Surface] = {}
        self._target_size: Optional[Tuple[int, int]] = None

    def layer_scale(self, layer: Layer) -> float:
        scale = self.resolution
        if layer.blurred:
            scale /= blur_factor(self.blur_radius)
        return scale

    def _offscreen(self, size: Tuple[int, int], scale: float) -> pygame.Surface:
        if size != self._target_size:
            self._offscreens = {}
            self._target_size = size
        layer = self._offscreens.get(scale)
        if layer is None:
            small = (max(1, int(size[0] * scale)), max(1, int(size[1] * scale)))
            layer = pygame.Surface(small, pygame.SRCALPHA)
            self._offscreens[scale] = layer
        layer.fill((0, 0, 0, 0))
        return layer

    def render(self, scene: Scene, surface: Optional[pygame.Surface]):
        if surface is None:
            return

        if self.background is not None:
            surface.fill(self.background)
        else:
            surface.fill((0, 0, 0, 0))

        size = surface.get_size()
        pending = None
        pending_scale = 1.0
        for layer in scene.layers:
            scale = self.layer_scale(layer)
            if pending is not None and scale != pending_scale:
                self._flush(pending, surface)
                pending = None

            if scale >= 1.0:
                for pool in layer.pools:
                    pool.draw(surface)
                continue

            if pending is None:
                pending = self._offscreen(size, scale)
                pending_scale = scale
            for pool in layer.pools:
                pool.draw(pending, scale)

        if pending is not None:
            self._flush(pending, surface)

    def _flush(self, layer: pygame.Surface, surface: pygame.Surface):
        surface.blit(pygame.transform.smoothscale(layer, surface.get_size()), (0, 0))
