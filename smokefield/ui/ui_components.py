import pygame
from typing import Callable, Optional
from smokefield.ui.theme import UITheme

class Button:
    """Term selector button; at most one in a group is active."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, font: pygame.font.Font,
                 action: Optional[Callable] = None):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.font = font
        self.action = action

        self.is_hovered = False
        self.is_pressed = False
        self.is_active = False

        # Pre-render text
        self.text_surf = self.font.render(self.text, True, UITheme.COLOR_TEXT_PRIMARY)
        self.text_rect = self.text_surf.get_rect(center=self.rect.center)

    def move_to(self, x: int, y: int):
        self.rect.topleft = (x, y)
        self.text_rect = self.text_surf.get_rect(center=self.rect.center)

    def update(self, mouse_pos, mouse_down) -> bool:
        """Update state. Returns True if clicked."""
        self.is_hovered = self.rect.collidepoint(mouse_pos)

        clicked = False
        if self.is_hovered and mouse_down:
            self.is_pressed = True
        elif not mouse_down and self.is_pressed:
            if self.is_hovered:
                # Click released inside
                clicked = True
                if self.action:
                    self.action()
            self.is_pressed = False

        return clicked

    def draw(self, surface: pygame.Surface):
        if self.is_active:
            color = UITheme.COLOR_BUTTON_ACTIVE
        elif self.is_hovered:
            color = UITheme.COLOR_BUTTON_HOVER
        else:
            color = UITheme.COLOR_BUTTON_NORMAL

        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        border = UITheme.COLOR_BUTTON_BORDER if self.is_active else UITheme.COLOR_PANEL_BORDER
        pygame.draw.rect(surface, border, self.rect, 2, border_radius=6)
        surface.blit(self.text_surf, self.text_rect)

class Slider:
    def __init__(self, x: int, y: int, width: int, height: int,
                 min_val: float, max_val: float, current_val: float,
                 step: float = 1.0):
        self.rect = pygame.Rect(x, y, width, height)
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.current_val = current_val

        self.is_dragging = False
        self.handle_width = 16

    def set_value(self, value: float):
        value = max(self.min_val, min(self.max_val, value))
        if self.step:
            value = self.min_val + round((value - self.min_val) / self.step) * self.step
        self.current_val = value

    @property
    def ratio(self) -> float:
        return (self.current_val - self.min_val) / (self.max_val - self.min_val)

    def update(self, mouse_pos, mouse_down) -> float:
        """Update state. Returns current value."""
        if mouse_down:
            if self.rect.inflate(0, 16).collidepoint(mouse_pos):
                self.is_dragging = True
        else:
            self.is_dragging = False

        if self.is_dragging:
            rel_x = mouse_pos[0] - self.rect.x - self.handle_width / 2
            ratio = max(0.0, min(1.0, rel_x / (self.rect.width - self.handle_width)))
            self.set_value(self.min_val + ratio * (self.max_val - self.min_val))

        return self.current_val

    def draw(self, surface: pygame.Surface):
        # Track Background
        track = pygame.Rect(self.rect.x, self.rect.centery - 2, self.rect.width, 4)
        pygame.draw.rect(surface, UITheme.COLOR_TRACK, track, border_radius=2)

        # Filled Track
        fill = pygame.Rect(track.x, track.y, int(self.ratio * track.width), 4)
        pygame.draw.rect(surface, UITheme.COLOR_TRACK_FILL, fill, border_radius=2)

        # Handle
        handle_x = self.rect.x + int(self.ratio * (self.rect.width - self.handle_width))
        handle_rect = pygame.Rect(handle_x, self.rect.y - 4, self.handle_width, self.rect.height + 8)
        pygame.draw.rect(surface, UITheme.COLOR_TEXT_PRIMARY, handle_rect, border_radius=4)
        if self.is_dragging:
            pygame.draw.rect(surface, UITheme.COLOR_TRACK_FILL, handle_rect, 2, border_radius=4)

class TextInput:
    """Single-line numeric entry."""

    def __init__(self, x: int, y: int, width: int, height: int,
                 font: pygame.font.Font, text: str = "", max_length: int = 9):
        self.rect = pygame.Rect(x, y, width, height)
        self.font = font
        self.text = text
        self.max_length = max_length
        self.has_focus = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the text changed."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.has_focus = self.rect.collidepoint(event.pos)
            return False
        if not self.has_focus:
            return False

        if event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            if self.text:
                self.text = self.text[:-1]
                return True
        elif event.type == pygame.TEXTINPUT:
            accepted = "".join(ch for ch in event.text if ch.isdigit())
            if accepted and len(self.text) < self.max_length:
                self.text = (self.text + accepted)[:self.max_length]
                return True
        return False

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, UITheme.COLOR_INPUT_BG, self.rect, border_radius=6)
        border = UITheme.COLOR_INPUT_FOCUS if self.has_focus else UITheme.COLOR_PANEL_BORDER
        pygame.draw.rect(surface, border, self.rect, 2, border_radius=6)
        text_surf = self.font.render(self.text, True, UITheme.COLOR_TEXT_PRIMARY)
        surface.blit(text_surf, text_surf.get_rect(midleft=(self.rect.x + 10, self.rect.centery)))
