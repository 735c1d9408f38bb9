import pygame

class UITheme:
    """Defines the visual style for the loan panel."""

    # Fonts (None = pygame's bundled default font)
    FONT_MAIN = None
    FONT_TITLE_SIZE = 40
    FONT_VALUE_SIZE = 34
    FONT_NORMAL_SIZE = 26
    FONT_SMALL_SIZE = 20

    # Colors (Burgundy / Gold palette)
    COLOR_PANEL_BG = (30, 16, 24, 235)
    COLOR_PANEL_BORDER = (90, 40, 60)

    COLOR_TEXT_PRIMARY = (236, 226, 214)
    COLOR_TEXT_SECONDARY = (150, 130, 128)
    COLOR_TEXT_ACCENT = (212, 175, 55)

    COLOR_BUTTON_NORMAL = (46, 24, 36)
    COLOR_BUTTON_HOVER = (70, 34, 52)
    COLOR_BUTTON_ACTIVE = (139, 30, 63)
    COLOR_BUTTON_BORDER = (212, 175, 55)

    COLOR_TRACK = (255, 255, 255, 26)
    COLOR_TRACK_FILL = (212, 175, 55)

    COLOR_INPUT_BG = (20, 10, 16)
    COLOR_INPUT_FOCUS = (212, 175, 55)

    # Layout
    BUTTON_HEIGHT = 40
    BUTTON_WIDTH = 70
    BUTTON_PADDING = 10
    PANEL_PADDING = 24
    INPUT_WIDTH = 160
    INPUT_HEIGHT = 40

    @staticmethod
    def load_fonts():
        """Initialize fonts (call during startup)."""
        pygame.font.init()
        return {
            'title': pygame.font.Font(UITheme.FONT_MAIN, UITheme.FONT_TITLE_SIZE),
            'value': pygame.font.Font(UITheme.FONT_MAIN, UITheme.FONT_VALUE_SIZE),
            'normal': pygame.font.Font(UITheme.FONT_MAIN, UITheme.FONT_NORMAL_SIZE),
            'small': pygame.font.Font(UITheme.FONT_MAIN, UITheme.FONT_SMALL_SIZE),
        }
