import copy
import json
import os
from typing import Dict, Any

from smokefield.core.constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, TARGET_FPS, SHOW_FPS,
    HERO_SMOKE_COUNT, SPARKLE_COUNT, CURSOR_SMOKE_CAP,
    BACKDROP_SMOKE_COUNT, BACKDROP_PUFF_CAP, BACKDROP_RESOLUTION, BLUR_RADIUS,
    RESIZE_DEBOUNCE_MS,
    LOAN_MIN_AMOUNT, LOAN_MAX_AMOUNT, LOAN_DEFAULT_AMOUNT, LOAN_ANNUAL_RATE,
    LOAN_TERMS, LOAN_DEFAULT_TERM
)
from smokefield.core.logger import get_logger

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "display": {
        "width": WINDOW_WIDTH,
        "height": WINDOW_HEIGHT,
        "target_fps": TARGET_FPS,
        "show_fps": SHOW_FPS
    },
    "particles": {
        "hero_smoke_count": HERO_SMOKE_COUNT,
        "sparkle_count": SPARKLE_COUNT,
        "cursor_smoke_cap": CURSOR_SMOKE_CAP,
        "backdrop_enabled": True,
        "backdrop_smoke_count": BACKDROP_SMOKE_COUNT,
        "backdrop_puff_cap": BACKDROP_PUFF_CAP,
        "backdrop_resolution": BACKDROP_RESOLUTION,
        "blur_radius": BLUR_RADIUS
    },
    "logging": {
        "level": "INFO"
    },
    "scheduler": {
        "resize_debounce_ms": RESIZE_DEBOUNCE_MS
    },
    "loan": {
        "min_amount": LOAN_MIN_AMOUNT,
        "max_amount": LOAN_MAX_AMOUNT,
        "default_amount": LOAN_DEFAULT_AMOUNT,
        "annual_rate": LOAN_ANNUAL_RATE,
        "terms": list(LOAN_TERMS),
        "default_term": LOAN_DEFAULT_TERM
    }
}

class SettingsManager:
    def __init__(self, path: str = SETTINGS_FILE):
        self.path = path
        self.settings = copy.deepcopy(DEFAULT_SETTINGS)
        self.load()

    def load(self):
        """Load settings from file."""
        if not os.path.exists(self.path):
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                saved = json.load(f)
                # Merge with defaults to ensure all keys exist
                self._recursive_update(self.settings, saved)
            get_logger().info(f"Settings loaded from {self.path}")
        except Exception as e:
            get_logger().error(f"Failed to load settings: {e}")

    def save(self):
        """Save settings to file."""
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4)
            get_logger().info("Settings saved")
        except Exception as e:
            get_logger().error(f"Failed to save settings: {e}")

    def _recursive_update(self, base: Dict, update: Dict):
        """Update dictionary recursively, preserving structure."""
        for k, v in update.items():
            if k in base and isinstance(base[k], dict) and isinstance(v, dict):
                self._recursive_update(base[k], v)
            else:
                base[k] = v

    def get(self, category: str, key: str) -> Any:
        return self.settings.get(category, {}).get(key)

    def set(self, category: str, key: str, value: Any):
        if category not in self.settings:
            self.settings[category] = {}
        self.settings[category][key] = value
        self.save()
