"""
Loan panel: binds the calculator to a slider, an amount entry and term buttons
"""

from typing import Dict, Optional

import pygame

from smokefield.core.constants import (
    LOAN_MIN_AMOUNT, LOAN_MAX_AMOUNT, LOAN_DEFAULT_AMOUNT, LOAN_ANNUAL_RATE,
    LOAN_TERMS, LOAN_DEFAULT_TERM, CURRENCY_SUFFIX
)
from smokefield.core.logger import get_logger
from smokefield.finance.loan_calculator import (
    LoanQuote, calculate_loan, clamp, format_quote, is_allowed_term, parse_amount
)
from smokefield.ui.theme import UITheme
from smokefield.ui.ui_components import Button, Slider, TextInput

RESULT_LABELS = (
    ("monthly_payment", "Rata lunară"),
    ("total_principal", "Suma împrumutată"),
    ("total_interest", "Dobândă totală"),
    ("total_payment", "Total de plată"),
)


class LoanPanel:
    """Real-time loan calculator panel; the result box hides when there is no quote."""

    def __init__(self, rect: pygame.Rect, fonts: Dict[str, pygame.font.Font],
                 min_amount: float = LOAN_MIN_AMOUNT,
                 max_amount: float = LOAN_MAX_AMOUNT,
                 default_amount: float = LOAN_DEFAULT_AMOUNT,
                 annual_rate: float = LOAN_ANNUAL_RATE,
                 terms=LOAN_TERMS,
                 default_term: int = LOAN_DEFAULT_TERM):
        self.rect = pygame.Rect(rect)
        self.fonts = fonts
        self.min_amount = min_amount
        self.max_amount = max_amount
        self.annual_rate = annual_rate
        self.terms = tuple(terms)
        self.selected_months = default_term if default_term in self.terms else self.terms[0]

        self.slider = Slider(0, 0, 10, 12, min_amount, max_amount, default_amount, step=100)
        self.entry = TextInput(0, 0, UITheme.INPUT_WIDTH, UITheme.INPUT_HEIGHT,
                               fonts['normal'], text=str(int(default_amount)))
        self.term_buttons = {
            months: Button(0, 0, UITheme.BUTTON_WIDTH, UITheme.BUTTON_HEIGHT,
                           f"{months} luni", fonts['small'],
                           action=lambda m=months: self.select_term(m))
            for months in self.terms
        }

        self.mouse_pos = (0, 0)
        self.mouse_down = False

        self.quote: Optional[LoanQuote] = None
        self.outputs: Dict[str, str] = {}
        self.result_visible = False

        self.layout(self.rect)
        self.select_term(self.selected_months)

    def layout(self, rect: pygame.Rect):
        self.rect = pygame.Rect(rect)
        pad = UITheme.PANEL_PADDING
        left = self.rect.x + pad
        top = self.rect.y + pad + 40

        self.entry.rect.topleft = (left, top)
        self.slider.rect = pygame.Rect(left + UITheme.INPUT_WIDTH + pad, top + 14,
                                       max(80, self.rect.width // 2 - UITheme.INPUT_WIDTH - 2 * pad), 12)
        x = left
        for months in self.terms:
            self.term_buttons[months].move_to(x, top + UITheme.INPUT_HEIGHT + pad)
            x += UITheme.BUTTON_WIDTH + UITheme.BUTTON_PADDING

    # -- input bindings ---------------------------------------------------

    def set_amount(self, value: float):
        """Slider moved: mirror into the entry and recompute."""
        self.slider.set_value(value)
        self.entry.text = str(int(self.slider.current_val))
        self.recalculate()

    def on_entry_changed(self):
        value = parse_amount(self.entry.text) or 0
        self.slider.set_value(clamp(value, self.min_amount, self.max_amount))
        self.recalculate()

    def select_term(self, months: int):
        if not is_allowed_term(months, self.terms):
            get_logger().warning(f"Ignoring unsupported loan term: {months}")
            return
        self.selected_months = months
        for m, button in self.term_buttons.items():
            button.is_active = m == months
        self.recalculate()

    def recalculate(self):
        self.quote = calculate_loan(self.entry.text, self.selected_months,
                                    self.annual_rate, self.min_amount, self.max_amount)
        if self.quote is None:
            self.outputs = {}
            self.result_visible = False
        else:
            self.outputs = format_quote(self.quote)
            self.result_visible = True

    # -- events / drawing -------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route an event to the panel widgets. Returns True if consumed."""
        if self.entry.handle_event(event):
            self.on_entry_changed()
            return True

        if event.type == pygame.MOUSEMOTION:
            self.mouse_pos = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_pos = event.pos
            self.mouse_down = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.mouse_pos = event.pos
            self.mouse_down = False
        else:
            return False

        for button in self.term_buttons.values():
            if button.update(self.mouse_pos, self.mouse_down):
                return True

        previous = self.slider.current_val
        value = self.slider.update(self.mouse_pos, self.mouse_down)
        if value != previous:
            self.set_amount(value)
            return True
        return self.rect.collidepoint(self.mouse_pos)

    def draw(self, surface: pygame.Surface):
        panel = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        panel.fill(UITheme.COLOR_PANEL_BG)
        surface.blit(panel, self.rect.topleft)
        pygame.draw.rect(surface, UITheme.COLOR_PANEL_BORDER, self.rect, 1, border_radius=8)

        pad = UITheme.PANEL_PADDING
        title = self.fonts['title'].render("Calculator credit", True, UITheme.COLOR_TEXT_ACCENT)
        surface.blit(title, (self.rect.x + pad, self.rect.y + pad - 8))

        self.entry.draw(surface)
        suffix = self.fonts['small'].render(CURRENCY_SUFFIX, True, UITheme.COLOR_TEXT_SECONDARY)
        surface.blit(suffix, suffix.get_rect(midright=(self.entry.rect.right - 8, self.entry.rect.centery)))
        self.slider.draw(surface)
        for button in self.term_buttons.values():
            button.draw(surface)

        if self.result_visible:
            self._draw_results(surface)

    def _draw_results(self, surface: pygame.Surface):
        pad = UITheme.PANEL_PADDING
        x = self.rect.centerx + pad
        y = self.rect.y + pad + 30
        for key, label in RESULT_LABELS:
            label_surf = self.fonts['small'].render(label, True, UITheme.COLOR_TEXT_SECONDARY)
            value_surf = self.fonts['value'].render(self.outputs[key], True, UITheme.COLOR_TEXT_PRIMARY)
            surface.blit(label_surf, (x, y))
            surface.blit(value_surf, (x + 220, y - 6))
            y += 36
