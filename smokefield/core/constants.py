"""
Smokefield - Constants and Configuration
Ambient smoke/sparkle hero effect and loan calculator
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Tuple

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Smokefield"
TARGET_FPS = 60
SHOW_FPS = False

# Hero region occupies the top part of the window
HERO_HEIGHT_RATIO = 0.62

# Off-surface pointer sentinel
POINTER_OFFSCREEN = -9999.0


# =============================================================================
# COLOR PALETTE - Burgundy / Gold
# =============================================================================
@dataclass(frozen=True)
class Colors:
    # Background
    PAGE_BG = (14, 8, 12)
    HERO_BG = (24, 10, 18)

    # Brand
    BURGUNDY = (139, 30, 63)
    GOLD = (212, 175, 55)
    CREAM = (220, 195, 140)

    # UI
    UI_BG = (30, 16, 24)
    UI_PANEL = (38, 20, 30)
    UI_BORDER = (90, 40, 60)
    UI_TEXT = (236, 226, 214)
    UI_TEXT_DIM = (150, 130, 128)
    UI_ACCENT = (212, 175, 55)
    UI_TRACK = (60, 45, 52)

COLORS = Colors()

# Page-wide smoke palette (RGB)
SMOKE_PALETTE = (
    (139, 30, 63),    # burgundy
    (107, 24, 50),    # dark burgundy
    (80, 15, 40),     # deep burgundy
    (160, 43, 75),    # mid burgundy
    (212, 175, 55),   # gold accent
    (180, 140, 40),   # dark gold
    (220, 195, 140),  # warm cream smoke
    (100, 40, 60),    # muted plum
)


# =============================================================================
# PARTICLE VARIANTS
# =============================================================================
class Growth(Enum):
    NONE = auto()   # radius fixed at birth
    RAMP = auto()   # r0 + (maxR - r0) * min(t * rate, 1)
    STEP = auto()   # r += rate per tick, capped at maxR


class Envelope(Enum):
    TRAPEZOID = auto()  # fade in / hold / fade out
    SINE = auto()       # base * sin(pi * t)


class Interaction(Enum):
    NONE = auto()
    REPEL = auto()
    ATTRACT = auto()


class Shape(Enum):
    GRADIENT = auto()
    DOT = auto()


@dataclass(frozen=True)
class ParticleSpec:
    """Birth ranges and per-tick coefficients for one particle variant."""
    name: str

    # Radius
    radius_range: Tuple[float, float]
    max_radius_range: Tuple[float, float]
    max_radius_relative: bool = False
    growth: Growth = Growth.RAMP
    growth_rate: float = 1.0

    # Opacity / life
    alpha_range: Tuple[float, float] = (1.0, 1.0)
    life_range: Tuple[int, int] = (100, 200)
    envelope: Envelope = Envelope.TRAPEZOID
    fade_in: float = 0.15
    fade_out_start: float = 0.60

    # Velocity at birth; vy is sampled as -uniform(vy_range)
    vx_spread: float = 0.0
    vy_range: Tuple[float, float] = (0.0, 0.0)
    pointer_inherit: float = 0.0

    # Turbulence: vx += amp * sin(life * freq + angle), angle += spin
    turbulence_amp: float = 0.0
    turbulence_freq: float = 0.0
    spin_spread: float = 0.0
    damping: Tuple[float, float] = (1.0, 1.0)
    lift: float = 0.0

    # Pointer interaction
    interaction: Interaction = Interaction.NONE
    force_radius: float = 0.0
    force_strength: float = 0.0
    drag: float = 0.0

    # Death boundary: y < -(maxR * radius_bound + top_margin); None disables
    top_margin: Optional[float] = None
    radius_bound: float = 1.0

    # Birth placement
    spawn_offset_range: Tuple[float, float] = (0.0, 0.0)
    spawn_jitter: float = 0.0
    spread_y_margin: float = 0.0
    spread_life_fraction: float = 1.0

    # Look
    shape: Shape = Shape.GRADIENT
    hsl_ranges: Optional[Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]] = None
    palette: Tuple[Tuple[int, int, int], ...] = ()
    scale_y_range: Tuple[float, float] = (1.0, 1.0)
    gradient_mid: float = 0.45
    gradient_mid_alpha: float = 0.45


# Ambient hero smoke: repelled and dragged by the pointer
HERO_SMOKE = ParticleSpec(
    name="hero_smoke",
    radius_range=(10.0, 28.0),
    max_radius_range=(45.0, 120.0),
    growth=Growth.RAMP,
    growth_rate=1.8,
    alpha_range=(0.42, 0.42),
    life_range=(130, 310),
    envelope=Envelope.TRAPEZOID,
    fade_in=0.12,
    fade_out_start=0.60,
    vx_spread=0.45,
    vy_range=(0.12, 0.50),
    turbulence_amp=0.01,
    spin_spread=0.022,
    damping=(0.988, 1.0),
    interaction=Interaction.REPEL,
    force_radius=160.0,
    force_strength=0.22,
    drag=0.05,
    top_margin=10.0,
    spawn_offset_range=(40.0, 40.0),
    hsl_ranges=((28.0, 58.0), (35.0, 65.0), (50.0, 68.0)),
    gradient_mid=0.45,
    gradient_mid_alpha=0.38,
)

# Gold sparkles: small sharp dots, gently attracted to the pointer
SPARKLE = ParticleSpec(
    name="sparkle",
    radius_range=(0.3, 1.6),
    max_radius_range=(0.0, 0.0),
    max_radius_relative=True,
    growth=Growth.NONE,
    alpha_range=(0.15, 0.60),
    life_range=(80, 220),
    envelope=Envelope.SINE,
    vx_spread=0.22,
    vy_range=(0.10, 0.55),
    interaction=Interaction.ATTRACT,
    force_radius=100.0,
    force_strength=0.008,
    top_margin=5.0,
    radius_bound=0.0,
    spawn_offset_range=(5.0, 5.0),
    shape=Shape.DOT,
    palette=(COLORS.GOLD,),
)

# Trail puffs left behind a fast-moving pointer
CURSOR_SMOKE = ParticleSpec(
    name="cursor_smoke",
    radius_range=(8.0, 20.0),
    max_radius_range=(30.0, 75.0),
    growth=Growth.RAMP,
    growth_rate=2.0,
    alpha_range=(0.55, 0.55),
    life_range=(60, 140),
    envelope=Envelope.SINE,
    vx_spread=0.6,
    vy_range=(0.0, 0.6),
    pointer_inherit=-0.04,
    damping=(0.97, 0.97),
    spawn_jitter=30.0,
    hsl_ranges=((35.0, 55.0), (60.0, 60.0), (65.0, 65.0)),
    gradient_mid=0.5,
    gradient_mid_alpha=0.3,
)

# Page-wide ambient smoke rising from below the window
BACKDROP_SMOKE = ParticleSpec(
    name="backdrop_smoke",
    radius_range=(40.0, 130.0),
    max_radius_range=(60.0, 160.0),
    max_radius_relative=True,
    growth=Growth.STEP,
    growth_rate=0.45,
    alpha_range=(0.012, 0.067),
    life_range=(180, 530),
    envelope=Envelope.TRAPEZOID,
    fade_in=0.15,
    fade_out_start=0.60,
    vx_spread=0.7,
    vy_range=(0.35, 1.45),
    turbulence_amp=0.018,
    turbulence_freq=0.025,
    spin_spread=0.008,
    lift=0.0008,
    top_margin=0.0,
    spawn_offset_range=(20.0, 80.0),
    spread_y_margin=100.0,
    spread_life_fraction=0.85,
    palette=SMOKE_PALETTE,
    scale_y_range=(0.6, 0.9),
)

# Page-wide pointer puffs
BACKDROP_PUFF = ParticleSpec(
    name="backdrop_puff",
    radius_range=(8.0, 33.0),
    max_radius_range=(25.0, 80.0),
    max_radius_relative=True,
    growth=Growth.STEP,
    growth_rate=0.45,
    alpha_range=(0.04, 0.14),
    life_range=(50, 120),
    envelope=Envelope.TRAPEZOID,
    fade_in=0.15,
    fade_out_start=0.60,
    vx_spread=0.7,
    vy_range=(0.35, 1.45),
    turbulence_amp=0.018,
    turbulence_freq=0.025,
    spin_spread=0.008,
    lift=0.0008,
    top_margin=0.0,
    spawn_jitter=30.0,
    palette=SMOKE_PALETTE,
    scale_y_range=(0.6, 0.9),
)

# Pool sizes
HERO_SMOKE_COUNT = 30
SPARKLE_COUNT = 55
CURSOR_SMOKE_CAP = 12
BACKDROP_SMOKE_COUNT = 55
BACKDROP_PUFF_CAP = 80
BACKDROP_PUFF_TRIM = 5

# Motion field
POINTER_SMOOTHING = 0.6
POINTER_VELOCITY_DECAY = 0.82
FORCE_EPSILON = 0.5

# Cursor trail spawning
TRAIL_MIN_SPEED = 2.0
TRAIL_SPEED_PER_PARTICLE = 4.0
TRAIL_MAX_PER_FRAME = 3
PUFF_FRAME_INTERVAL = 4
PUFF_BATCH = 1

# Rendering
BLUR_RADIUS = 7
MIN_DRAW_ALPHA = 0.001
# Fraction of the window size the page backdrop is drawn at
BACKDROP_RESOLUTION = 0.25

# Scheduling
RESIZE_DEBOUNCE_MS = 200


# =============================================================================
# LOAN CALCULATOR
# =============================================================================
LOAN_MIN_AMOUNT = 1000
LOAN_MAX_AMOUNT = 50000
LOAN_DEFAULT_AMOUNT = 10000
LOAN_ANNUAL_RATE = 0.07
LOAN_TERMS = (12, 24, 36, 48, 60)
LOAN_DEFAULT_TERM = 24
CURRENCY_SUFFIX = "lei"
MONTHLY_SUFFIX = "lei/lună"
THOUSANDS_SEPARATOR = "."
