"""
Windmill Geometry (Layout Engine)
=================================
Pure functions that turn the widget's pixel size into drawable geometry.

Why is this file needed?
------------------------
1. Layout: All sizes of the windmill derive from the widget width, so they are
   recomputed in one place whenever the widget is resized.
2. Rotation: Blades are rotated by transforming their vertices directly,
   instead of rotating a shared painter transform.

Screen convention: x grows to the right, y grows downwards, positive angles
turn clockwise on screen.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from windmill.config import BLADE_COUNT
from windmill.model.path import Path, Rect

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class GeometryConstants:
    """Derived layout values, all in pixels."""
    center_x: float = 0.0
    center_y: float = 0.0
    pivot_radius: float = 0.0
    blade_length: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        return self.center_x, self.center_y


def recompute(width: int, height: int) -> GeometryConstants:
    """
    Derive the layout constants from the surface size.

    The windmill is centered on a square derived from the width; `height` only
    matters for the pillar, which reaches down to the bottom of the surface.

    Args:
        width: Surface width in pixels.
        height: Surface height in pixels (unused for centering).

    Returns:
        The new GeometryConstants. Zero or negative sizes yield degenerate
        geometry rather than an error.
    """
    center = width / 2
    pivot_radius = width / 40
    return GeometryConstants(
        center_x=center,
        center_y=center,
        pivot_radius=pivot_radius,
        blade_length=center - 2 * pivot_radius,
    )


def rotate_points(
    points: npt.ArrayLike,
    angle_deg: float,
    center: tuple[float, float]
) -> npt.NDArray[np.float64]:
    """
    Rotate (N, 2) points about `center`, clockwise on screen for positive angles.

    Args:
        points: Array-like of shape (N, 2).
        angle_deg: Rotation angle in degrees.
        center: (x, y) pivot of the rotation.

    Returns:
        A new array of shape (N, 2).
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    theta = np.deg2rad(angle_deg)
    cos_a = np.cos(theta)
    sin_a = np.sin(theta)
    rot = np.array([[cos_a, -sin_a],
                    [sin_a, cos_a]])
    origin = np.asarray(center, dtype=np.float64)
    return (pts - origin) @ rot.T + origin


def blade_vertices(constants: GeometryConstants) -> npt.NDArray[np.float64]:
    """
    Vertices A, B, C of the unrotated blade triangle.

    A sits on the pivot rim, B is the blade tip straight above the center, and
    C closes the triangle on the right. C's y is measured from the top of the
    surface, not from the center.
    """
    cx, cy = constants.center
    r = constants.pivot_radius
    length = constants.blade_length
    return np.array([
        [cx, cy - r],
        [cx, cy - r - length],
        [cx + r, r + length * 2.0 / 3.0],
    ])


def blade_outlines(
    constants: GeometryConstants,
    angle_deg: float
) -> list[npt.NDArray[np.float64]]:
    """
    The three blade triangles for one frame.

    Blade i is the base triangle rotated by `angle_deg + i * 120` about the
    center, so neighbouring blades are exactly 120 degrees apart.
    """
    base = blade_vertices(constants)
    step = 360.0 / BLADE_COUNT
    return [
        rotate_points(base, angle_deg + i * step, constants.center)
        for i in range(BLADE_COUNT)
    ]


def pillar_path(constants: GeometryConstants, height: float) -> Path:
    """
    Outline of the support pillar, drawn in the unrotated frame.

    The pillar is a trapezoid from just below the pivot down to the bottom of
    the surface, capped with half ellipses at both ends.
    """
    cx, cy = constants.center
    r = constants.pivot_radius

    path = Path()
    path.add_polygon([
        [cx - r / 2, cy + r + r / 2],
        [cx + r / 2, cy + r + r / 2],
        [cx + r, height - 2 * r],
        [cx - r, height - 2 * r],
    ])
    # top cap
    path.add_arc(Rect(cx - r / 2, cy + r, cx + r / 2, cy + 2 * r), 180.0, 180.0)
    # bottom cap
    path.add_arc(Rect(cx - r, height - 3 * r, cx + r, height - r), 0.0, 180.0)
    return path


def arc_points(
    rect: Rect,
    start_deg: float,
    sweep_deg: float,
    n_points: int = 32
) -> npt.NDArray[np.float64]:
    """
    Discretize an elliptical arc inscribed in `rect`.

    Painting hands arcs to the surface as-is (QPainterPath.arcTo); this is the
    reference polyline for the same angle convention, used to check where an
    Arc contour actually lies.

    Args:
        rect: Bounding box of the full ellipse.
        start_deg: Start angle, 0 at 3 o'clock.
        sweep_deg: Sweep, positive is clockwise on screen.
        n_points: Number of points to generate (including endpoints).

    Returns:
        Array of shape (n_points, 2) with the (x, y) coordinates along the arc.
    """
    cx, cy = rect.center
    a = rect.width / 2.0
    b = rect.height / 2.0
    angles = np.deg2rad(np.linspace(start_deg, start_deg + sweep_deg, n_points))
    return np.column_stack((cx + a * np.cos(angles), cy + b * np.sin(angles)))
