"""
Vector Paths
============
Backend-neutral description of a filled shape made of several contours.

A surface (QPainter, a recording list, ...) turns a Path into its own
native drawing calls, so the geometry stays free of any GUI toolkit.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Rect:
    """Axis-aligned bounding box in screen coordinates (y points down)."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0


@dataclass(frozen=True, eq=False)
class Polygon:
    """A closed polyline contour."""
    points: npt.NDArray[np.float64]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.points.shape == other.points.shape and np.array_equal(self.points, other.points)

    __hash__ = None


@dataclass(frozen=True)
class Arc:
    """
    Elliptical arc inscribed in `rect`.

    Angles are in degrees, 0 at 3 o'clock, positive sweep clockwise on screen.
    The arc starts a new contour.
    """
    rect: Rect
    start_deg: float
    sweep_deg: float


Contour = Union[Polygon, Arc]


@dataclass
class Path:
    """Ordered list of contours filled together as one shape."""
    contours: list[Contour] = field(default_factory=list)

    def add_polygon(self, points: npt.ArrayLike) -> Path:
        self.contours.append(Polygon(np.asarray(points, dtype=np.float64).reshape(-1, 2)))
        return self

    def add_arc(self, rect: Rect, start_deg: float, sweep_deg: float) -> Path:
        self.contours.append(Arc(rect, start_deg, sweep_deg))
        return self

    @property
    def polygons(self) -> list[Polygon]:
        return [c for c in self.contours if isinstance(c, Polygon)]

    @property
    def arcs(self) -> list[Arc]:
        return [c for c in self.contours if isinstance(c, Arc)]

    def __len__(self) -> int:
        return len(self.contours)
