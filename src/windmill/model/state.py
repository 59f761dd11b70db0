"""
Windmill State (Data Model)
===========================
This module defines the single mutable record behind one windmill widget.

Why is this file needed?
------------------------
1. State Management: Surface size, derived geometry, rotation phase and fill
   color are held in one place.
2. Decoupling: The view reads from this object; the animator and resize
   handling write to it.

Classes:
    WindmillState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from windmill.config import ANGLE_STEP, FULL_TURN, DEFAULT_FILL_COLOR
from windmill.model.color import Rgba
from windmill.model.geometry import GeometryConstants, recompute

logger = logging.getLogger(__name__)


def next_angle(angle: int, step: int = ANGLE_STEP) -> int:
    """
    Advance the rotation phase by `step` degrees.

    The phase stays in [0, 360): once it would reach a full turn it restarts at
    1 rather than 0.
    """
    angle = angle + step
    if angle < 0 or angle >= FULL_TURN:
        return 1
    return angle


@dataclass
class WindmillState:
    width: int = 0
    height: int = 0
    rotation_angle: int = 0
    fill_color: Rgba = DEFAULT_FILL_COLOR
    constants: GeometryConstants = field(default_factory=GeometryConstants)

    def resize(self, width: int, height: int) -> GeometryConstants:
        """Store the new surface size and recompute the layout constants."""
        self.width = width
        self.height = height
        self.constants = recompute(width, height)
        logger.debug(f"Resized to {width}x{height}: {self.constants}")
        return self.constants

    def advance(self) -> int:
        """Move the animation forward one tick and return the new angle."""
        self.rotation_angle = next_angle(self.rotation_angle)
        return self.rotation_angle
