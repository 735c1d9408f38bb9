"""
Smokefield - Application Shell
Window, event pump, and wiring between the scenes, renderers and loan panel
"""

import random
from typing import Optional, Tuple

import pygame

from smokefield.core.constants import COLORS, HERO_HEIGHT_RATIO, WINDOW_TITLE
from smokefield.core.logger import get_logger, init_logger
from smokefield.core.pointer import PointerTracker
from smokefield.core.scheduler import FrameScheduler
from smokefield.core.settings_manager import SettingsManager
from smokefield.graphics.renderer import Renderer
from smokefield.simulation.scene import build_backdrop_scene, build_hero_scene
from smokefield.ui.loan_panel import LoanPanel
from smokefield.ui.theme import UITheme


class App:
    """
    Hosts the page: a full-window backdrop, a hero region with its own
    particle surface, and the loan panel below it.
    """

    def __init__(self, settings: Optional[SettingsManager] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or SettingsManager()
        self.rng = rng or random.Random()
        get_logger().set_level(self.settings.get("logging", "level"))

        self.screen: Optional[pygame.Surface] = None
        self.hero_surface: Optional[pygame.Surface] = None
        self.hero_rect = pygame.Rect(0, 0, 0, 0)
        self.panel_rect = pygame.Rect(0, 0, 0, 0)

        self.hero_pointer = PointerTracker(self.hero_rect)
        self.page_pointer = PointerTracker(pygame.Rect(0, 0, 0, 0), bounded=False)

        particles = self.settings.settings["particles"]
        self.hero = build_hero_scene(
            self.hero_pointer, self.rng,
            smoke_count=particles["hero_smoke_count"],
            sparkle_count=particles["sparkle_count"],
            trail_cap=particles["cursor_smoke_cap"],
        )
        self.backdrop = None
        if particles["backdrop_enabled"]:
            self.backdrop = build_backdrop_scene(
                self.page_pointer, self.rng,
                smoke_count=particles["backdrop_smoke_count"],
                puff_cap=particles["backdrop_puff_cap"],
            )

        self.hero_renderer = Renderer(blur_radius=particles["blur_radius"])
        self.backdrop_renderer = Renderer(
            blur_radius=0, background=COLORS.PAGE_BG,
            resolution=particles["backdrop_resolution"],
        )

        self.scheduler = FrameScheduler(
            self._frame, self._reinit,
            debounce_ms=self.settings.get("scheduler", "resize_debounce_ms"),
            target_fps=self.settings.get("display", "target_fps"),
        )
        self.show_fps = self.settings.get("display", "show_fps")

        self.fonts = None
        self.panel: Optional[LoanPanel] = None

    def start(self) -> bool:
        """Open the window. Returns False (and disables effects) if no display is available."""
        size = (self.settings.get("display", "width"), self.settings.get("display", "height"))
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as e:
            get_logger().warning(f"No drawing surface available, particle effects disabled: {e}")
            self.screen = None
            return False

        self.fonts = UITheme.load_fonts()
        loan = self.settings.settings["loan"]
        self.panel = LoanPanel(
            self.panel_rect, self.fonts,
            min_amount=loan["min_amount"],
            max_amount=loan["max_amount"],
            default_amount=loan["default_amount"],
            annual_rate=loan["annual_rate"],
            terms=loan["terms"],
            default_term=loan["default_term"],
        )
        pygame.key.start_text_input()
        self._reinit(self.screen.get_size())
        get_logger().info(f"Smokefield started at {size[0]}x{size[1]}")
        return True

    def _layout(self, size: Tuple[int, int]):
        width, height = size
        self.hero_rect = pygame.Rect(0, 0, width, int(height * HERO_HEIGHT_RATIO))
        margin = UITheme.PANEL_PADDING
        self.panel_rect = pygame.Rect(
            margin, self.hero_rect.bottom + margin,
            max(1, width - 2 * margin), max(1, height - self.hero_rect.bottom - 2 * margin),
        )

    def _reinit(self, size: Tuple[int, int]):
        """Recompute surface sizes and re-seed every pool with spread births."""
        self._layout(size)
        self.hero_surface = pygame.Surface(self.hero_rect.size, pygame.SRCALPHA)
        self.hero_pointer.set_rect(self.hero_rect)
        self.page_pointer.set_rect(pygame.Rect((0, 0), size))

        self.hero.reseed(self.hero_rect.width, self.hero_rect.height, spread=True)
        if self.backdrop:
            self.backdrop.reseed(size[0], size[1], spread=True)
        if self.panel:
            self.panel.layout(self.panel_rect)

    def _frame(self):
        # Update phase
        if self.backdrop:
            self.backdrop.step()
        self.hero.step()

        # Render phase
        if self.backdrop:
            self.backdrop_renderer.render(self.backdrop, self.screen)
        else:
            self.screen.fill(COLORS.PAGE_BG)

        self.screen.fill(COLORS.HERO_BG, self.hero_rect)
        self.hero_renderer.render(self.hero, self.hero_surface)
        self.screen.blit(self.hero_surface, self.hero_rect.topleft)
        self._draw_headline()

        if self.panel:
            self.panel.draw(self.screen)

        if self.show_fps:
            pygame.display.set_caption(f"{WINDOW_TITLE} | FPS: {self.scheduler.fps:.1f}")
        pygame.display.flip()

    def _draw_headline(self):
        title = self.fonts['title'].render("Credit rapid, fără bătăi de cap", True, COLORS.CREAM)
        self.screen.blit(title, title.get_rect(center=self.hero_rect.center))

    def _poll_events(self):
        window_size = self.screen.get_size()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.scheduler.stop()
            elif event.type == pygame.VIDEORESIZE:
                self.scheduler.notify_resize(event.size, pygame.time.get_ticks())
            elif event.type == pygame.WINDOWSIZECHANGED:
                self.scheduler.notify_resize((event.x, event.y), pygame.time.get_ticks())
            else:
                self.hero_pointer.handle_event(event, window_size)
                self.page_pointer.handle_event(event, window_size)
                self.panel.handle_event(event)

    def run(self):
        """Main loop."""
        if not self.start():
            return
        try:
            self.scheduler.run(self._poll_events)
        finally:
            self._cleanup()

    def _cleanup(self):
        get_logger().info("Shutting down")
        pygame.quit()


def main():
    """Entry point."""
    init_logger()
    App().run()


if __name__ == "__main__":
    main()
