"""
Pointer Tracker for Smokefield
Converts window-space pointer events into surface-local position and velocity
"""

import math

import pygame

from smokefield.core.constants import POINTER_OFFSCREEN, POINTER_SMOOTHING, POINTER_VELOCITY_DECAY


class PointerTracker:
    """Tracks the pointer relative to one drawing surface."""

    def __init__(self, rect: pygame.Rect, smoothing: float = POINTER_SMOOTHING,
                 decay_factor: float = POINTER_VELOCITY_DECAY, bounded: bool = True):
        self.rect = pygame.Rect(rect)
        self.bounded = bounded
        self.smoothing = smoothing
        self.decay_factor = decay_factor

        self.x = POINTER_OFFSCREEN
        self.y = POINTER_OFFSCREEN
        self.vx = 0.0
        self.vy = 0.0
        self.active = False

    def set_rect(self, rect: pygame.Rect):
        """Update the surface's bounding rectangle in window space."""
        self.rect = pygame.Rect(rect)

    def move(self, client_x: float, client_y: float):
        """Record a pointer sample given in window coordinates."""
        if self.bounded and not self.rect.collidepoint(client_x, client_y):
            if self.active:
                self.leave()
            return
        nx = client_x - self.rect.left
        ny = client_y - self.rect.top
        if self.active:
            if nx == self.x and ny == self.y:
                # Repeated sample; keep the current velocity
                return
            self.vx = (nx - self.x) * self.smoothing
            self.vy = (ny - self.y) * self.smoothing
        self.x = nx
        self.y = ny
        self.active = True

    def leave(self):
        self.x = POINTER_OFFSCREEN
        self.y = POINTER_OFFSCREEN
        self.vx = 0.0
        self.vy = 0.0
        self.active = False

    def decay(self):
        """Fade the velocity kick once the frame has consumed it."""
        self.vx *= self.decay_factor
        self.vy *= self.decay_factor

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)

    def handle_event(self, event: pygame.event.Event, window_size: tuple[int, int]) -> bool:
        """Feed a pygame event. Returns True if it was a pointer event."""
        if event.type == pygame.MOUSEMOTION:
            # SDL echoes touches as mouse motion; FINGERMOTION already covers them
            if getattr(event, "touch", False):
                return False
            self.move(*event.pos)
            return True
        if event.type == pygame.FINGERMOTION:
            # Touch coordinates are normalised to the window
            self.move(event.x * window_size[0], event.y * window_size[1])
            return True
        if event.type == pygame.WINDOWLEAVE:
            self.leave()
            return True
        if event.type == pygame.ACTIVEEVENT:
            if event.state & pygame.APPMOUSEFOCUS and not event.gain:
                self.leave()
                return True
            return False
        return False
