"""
Frame Scheduler for Smokefield
Drives one update+render cycle per display refresh and debounces resizes
"""

from typing import Callable, Optional, Tuple

import pygame

from smokefield.core.constants import RESIZE_DEBOUNCE_MS, TARGET_FPS
from smokefield.core.logger import get_logger


class FrameScheduler:
    """
    Self-rescheduling frame loop with an explicit cancellation handle.

    Each completed frame schedules the next by taking a fresh handle. A
    settled resize cancels the pending handle, re-initialises, then resumes,
    so there is never more than one live frame chain.
    """

    def __init__(self, on_frame: Callable[[], None],
                 on_reinit: Callable[[Tuple[int, int]], None],
                 debounce_ms: int = RESIZE_DEBOUNCE_MS,
                 target_fps: int = TARGET_FPS):
        self.on_frame = on_frame
        self.on_reinit = on_reinit
        self.debounce_ms = debounce_ms
        self.target_fps = target_fps

        self.frame_handle: Optional[int] = None
        self._last_handle = 0
        self.running = False
        self.frames_run = 0
        self.reinit_count = 0

        # Pending resize
        self.pending_size: Optional[Tuple[int, int]] = None
        self.resize_deadline: Optional[int] = None

        self.clock: Optional[pygame.time.Clock] = None

    def schedule(self) -> int:
        """Request the next frame; replaces any pending handle."""
        self._last_handle += 1
        self.frame_handle = self._last_handle
        return self.frame_handle

    def cancel(self):
        self.frame_handle = None

    def start(self):
        self.running = True
        self.schedule()

    def stop(self):
        self.running = False
        self.cancel()

    def notify_resize(self, size: Tuple[int, int], now_ms: int):
        """Record a resize; re-init happens once resizes stop for debounce_ms."""
        self.pending_size = (int(size[0]), int(size[1]))
        self.resize_deadline = now_ms + self.debounce_ms

    def pump(self, now_ms: int) -> bool:
        """Run one scheduler iteration. Returns True if a frame was drawn."""
        if self.resize_deadline is not None and now_ms >= self.resize_deadline:
            size = self.pending_size
            self.pending_size = None
            self.resize_deadline = None

            self.cancel()
            get_logger().info(f"Resize settled at {size[0]}x{size[1]}, re-seeding")
            self.on_reinit(size)
            self.reinit_count += 1
            if self.running:
                self.schedule()

        if self.frame_handle is None:
            return False

        self.on_frame()
        self.frames_run += 1
        self.schedule()
        return True

    def run(self, poll_events: Callable[[], None],
            now: Callable[[], int] = pygame.time.get_ticks):
        """Main loop. poll_events may call stop() to end it."""
        self.clock = pygame.time.Clock()
        self.start()
        while self.running:
            self.clock.tick(self.target_fps)
            poll_events()
            if not self.running:
                break
            self.pump(now())

    @property
    def fps(self) -> float:
        return self.clock.get_fps() if self.clock else 0.0
