"""
Settings management for the CSS filter editor.

Handles persistent storage of user preferences in settings.ini.
"""

import logging
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

from ..filters.gestures import FAST_VALUE_MULTIPLIER, LIST_ITEM_HEIGHT, SLOW_VALUE_MULTIPLIER
from ..filters.tokenizer import NONE_VALUE


logger = logging.getLogger(__name__)


class Settings:
    """Manages application settings via settings.ini."""

    # Settings file location (project root)
    SETTINGS_FILE = Path(__file__).parent.parent.parent / "settings.ini"

    # Section and keys
    SECTION = "preferences"
    KEY_ROW_HEIGHT = "row_height"
    KEY_SLOW_MULTIPLIER = "slow_multiplier"
    KEY_FAST_MULTIPLIER = "fast_multiplier"
    KEY_LAST_FILTER_VALUE = "last_filter_value"

    DEFAULTS = {
        KEY_ROW_HEIGHT: str(LIST_ITEM_HEIGHT),
        KEY_SLOW_MULTIPLIER: str(SLOW_VALUE_MULTIPLIER),
        KEY_FAST_MULTIPLIER: str(FAST_VALUE_MULTIPLIER),
        KEY_LAST_FILTER_VALUE: NONE_VALUE,
    }

    def __init__(self, settings_file: Optional[Path] = None):
        """Initialize settings from file or create defaults."""
        self.settings_file = Path(settings_file) if settings_file else self.SETTINGS_FILE
        # CSS values contain "%", so interpolation stays off
        self.config = ConfigParser(interpolation=None)
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults."""
        if self.settings_file.exists():
            self.config.read(self.settings_file)
            logger.debug("Loaded settings from %s", self.settings_file)
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        missing = [key for key in self.DEFAULTS if not self.config.has_option(self.SECTION, key)]
        for key in missing:
            self.config.set(self.SECTION, key, self.DEFAULTS[key])
        if missing:
            self._save()

    def _save(self) -> None:
        """Save settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            self.config.write(f)

    def _get_float(self, key: str) -> float:
        default = float(self.DEFAULTS[key])
        try:
            value = self.config.getfloat(self.SECTION, key, fallback=default)
        except ValueError:
            logger.warning("Ignoring invalid %s in %s", key, self.settings_file)
            return default
        return value if value > 0 else default

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def get_row_height(self) -> int:
        """Height in pixels of one filter row (default: 32)."""
        return int(self._get_float(self.KEY_ROW_HEIGHT))

    def set_row_height(self, height: int) -> None:
        """Set and save the filter row height."""
        self._set(self.KEY_ROW_HEIGHT, str(int(height)))

    def get_slow_multiplier(self) -> float:
        """Value drag multiplier while Alt is held (default: 0.1)."""
        return self._get_float(self.KEY_SLOW_MULTIPLIER)

    def get_fast_multiplier(self) -> float:
        """Value drag multiplier while Shift is held (default: 10)."""
        return self._get_float(self.KEY_FAST_MULTIPLIER)

    def set_multipliers(self, slow: float, fast: float) -> None:
        """Set and save both drag multipliers."""
        self.config.set(self.SECTION, self.KEY_SLOW_MULTIPLIER, str(slow))
        self._set(self.KEY_FAST_MULTIPLIER, str(fast))

    def get_last_filter_value(self) -> str:
        """Last edited CSS filter value (default: 'none')."""
        value = self.config.get(self.SECTION, self.KEY_LAST_FILTER_VALUE, fallback=NONE_VALUE)
        return value.strip() or NONE_VALUE

    def set_last_filter_value(self, css: str) -> None:
        """Set and save the last edited CSS filter value."""
        self._set(self.KEY_LAST_FILTER_VALUE, css)
