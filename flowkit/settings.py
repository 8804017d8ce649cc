"""
Player settings lookups.

Settings are stored as flat key/value pairs by whatever persistence layer
the game uses. Booleans are stored as ints (non-zero is true).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

MASTER_VOLUME_KEY = "Settings.Volume.Master"
MUSIC_VOLUME_KEY = "Settings.Volume.Music"
SFX_VOLUME_KEY = "Settings.Volume.SFX"

INVERT_Y_KEY = "Settings.Controls.InvertY"
MOUSE_SENSITIVITY_KEY = "Settings.Controls.Sensitivity.Mouse"
CONTROLLER_SENSITIVITY_KEY = "Settings.Controls.Sensitivity.Controller"

DEFAULTS: dict[str, Any] = {
    MASTER_VOLUME_KEY: 1.0,
    MUSIC_VOLUME_KEY: 1.0,
    SFX_VOLUME_KEY: 1.0,
    INVERT_Y_KEY: True,
    MOUSE_SENSITIVITY_KEY: 1.0,
    CONTROLLER_SENSITIVITY_KEY: 1.0,
}


class SettingsStore:
    """
    Read-only view over stored settings with built-in defaults.

    Usage:
        settings = SettingsStore({"Settings.Controls.InvertY": 0})
        settings.get_bool(INVERT_Y_KEY)  # False
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Mapping[str, Any] = values if values is not None else {}

    def get_float(self, key: str, default: Optional[float] = None) -> float:
        value = self._lookup(key, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Setting '{key}' is not a number: {value!r}")
            return float(self._fallback(key, default) or 0.0)

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        value = self._lookup(key, default)
        if isinstance(value, bool):
            return value
        try:
            return int(value) != 0
        except (TypeError, ValueError):
            logger.warning(f"Setting '{key}' is not a flag: {value!r}")
            return bool(self._fallback(key, default))

    def _lookup(self, key: str, default: Any) -> Any:
        if key in self._values:
            return self._values[key]
        return self._fallback(key, default)

    def _fallback(self, key: str, default: Any) -> Any:
        if default is not None:
            return default
        if key not in DEFAULTS:
            logger.warning(f"Unknown setting '{key}'")
            return None
        return DEFAULTS[key]
