"""
Configuration
=============
This module serves as the central registry for animation constants and the
user-tunable settings of the windmill.

Why is this file needed?
------------------------
1. Constants: Tick cadence, angle step and blade count live in one place
   instead of being scattered through the view and the animator.
2. Settings: The fill color and tick interval can be stored in the Qt settings
   file (INI format) and overridden from the command line.

Exports:
    TICK_INTERVAL_MS (int): Delay between two animation ticks.
    ANGLE_STEP (int): Degrees added to the rotation per tick.
    BLADE_COUNT (int): Number of blades.
    DEFAULT_FILL_COLOR (Rgba): Opaque white.
    WindmillConfig: Resolved settings.
    load_config: Reads settings and applies overrides.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, TYPE_CHECKING

from windmill.model.color import Rgba, WHITE, ColorFormatError, parse_color

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Global Constants
TICK_INTERVAL_MS: int = 10
ANGLE_STEP: int = 1
FULL_TURN: int = 360
BLADE_COUNT: int = 3
DEFAULT_FILL_COLOR: Rgba = WHITE

# Settings keys
COLOR_KEY = "windmill/color"
INTERVAL_KEY = "windmill/interval_ms"


@dataclass(frozen=True)
class WindmillConfig:
    fill_color: Rgba = DEFAULT_FILL_COLOR
    interval_ms: int = TICK_INTERVAL_MS


def parse_interval(value: Any) -> int:
    """Convert a settings/CLI value into a positive tick interval in ms."""
    interval = int(value)
    if interval <= 0:
        raise ValueError(f"Tick interval must be positive, got {interval}")
    return interval


def load_config(
    settings: Optional[QSettings] = None,
    overrides: Optional[Mapping[str, Any]] = None
) -> WindmillConfig:
    """
    Resolve the windmill configuration.

    Lookup order: overrides (e.g. command line) > QSettings > defaults.
    Malformed values are logged and replaced by their defaults.

    Args:
        settings: Optional QSettings instance to read 'windmill/*' keys from.
        overrides: Optional mapping with 'color' and/or 'interval_ms'.
    """
    raw: dict[str, Any] = {}
    if settings is not None:
        if settings.contains(COLOR_KEY):
            raw["color"] = settings.value(COLOR_KEY)
        if settings.contains(INTERVAL_KEY):
            raw["interval_ms"] = settings.value(INTERVAL_KEY)
    if overrides:
        raw.update({k: v for k, v in overrides.items() if v is not None})

    fill_color = DEFAULT_FILL_COLOR
    if "color" in raw:
        try:
            fill_color = parse_color(str(raw["color"]))
        except ColorFormatError as e:
            logger.warning(f"{e}; using default {DEFAULT_FILL_COLOR.to_hex()}")

    interval_ms = TICK_INTERVAL_MS
    if "interval_ms" in raw:
        try:
            interval_ms = parse_interval(raw["interval_ms"])
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid tick interval ({e}); using default {TICK_INTERVAL_MS} ms")

    return WindmillConfig(fill_color=fill_color, interval_ms=interval_ms)
