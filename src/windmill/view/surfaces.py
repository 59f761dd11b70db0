"""
Drawing Surfaces
================
Targets the frame renderer can paint on.

Classes:
    Surface: Protocol with the two filled primitives the windmill needs.
    QPainterSurface: Paints on a QPainter (widget, QImage, printer, ...).
    RecordingSurface: Keeps a display list of draw calls, no painting.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Protocol

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath

from windmill.model.color import Rgba
from windmill.model.path import Arc, Path, Polygon


class Surface(Protocol):
    def fill_circle(self, cx: float, cy: float, radius: float, color: Rgba) -> None: ...

    def fill_path(self, path: Path, color: Rgba) -> None: ...


# -------------------------------------------------------------------------------
# Qt
# -------------------------------------------------------------------------------

def to_qcolor(color: Rgba) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def to_qpainter_path(path: Path) -> QPainterPath:
    """
    Convert a Path into a QPainterPath filled with the non-zero winding rule.

    Qt measures arc angles counter-clockwise, so arc angles are negated to keep
    the clockwise-on-screen convention of the model.
    """
    qpath = QPainterPath()
    qpath.setFillRule(Qt.FillRule.WindingFill)
    for contour in path.contours:
        if isinstance(contour, Polygon):
            if len(contour.points) == 0:
                continue
            x0, y0 = contour.points[0]
            qpath.moveTo(float(x0), float(y0))
            for x, y in contour.points[1:]:
                qpath.lineTo(float(x), float(y))
            qpath.closeSubpath()
        elif isinstance(contour, Arc):
            rect = contour.rect
            qrect = QRectF(rect.left, rect.top, rect.width, rect.height)
            qpath.arcMoveTo(qrect, -contour.start_deg)
            qpath.arcTo(qrect, -contour.start_deg, -contour.sweep_deg)
    return qpath


class QPainterSurface:
    """Anti-aliased, fill-only painting on an active QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.painter.setPen(Qt.PenStyle.NoPen)

    def fill_circle(self, cx: float, cy: float, radius: float, color: Rgba) -> None:
        self.painter.setBrush(to_qcolor(color))
        self.painter.drawEllipse(QPointF(cx, cy), radius, radius)

    def fill_path(self, path: Path, color: Rgba) -> None:
        self.painter.setBrush(to_qcolor(color))
        self.painter.drawPath(to_qpainter_path(path))


# -------------------------------------------------------------------------------
# Recording
# -------------------------------------------------------------------------------

@dataclass
class DrawCall:
    kind: Literal["circle", "path"]
    color: Rgba
    center: Optional[tuple[float, float]] = None
    radius: Optional[float] = None
    path: Optional[Path] = None


@dataclass
class RecordingSurface:
    """Collects draw calls in paint order."""
    calls: list[DrawCall] = field(default_factory=list)

    def fill_circle(self, cx: float, cy: float, radius: float, color: Rgba) -> None:
        self.calls.append(DrawCall("circle", color, center=(cx, cy), radius=radius))

    def fill_path(self, path: Path, color: Rgba) -> None:
        self.calls.append(DrawCall("path", color, path=path))

    @property
    def paths(self) -> list[Path]:
        return [c.path for c in self.calls if c.kind == "path"]
