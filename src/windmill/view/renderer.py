"""
Frame Renderer
==============
Paints one frame of the windmill: pivot, three blades, then the pillar.

Paint order matters, later shapes cover earlier ones where they overlap.
Blades are rotated by transforming their vertices, so the pillar is always
drawn in the unrotated frame.
"""
from __future__ import annotations

from windmill.model.color import Rgba
from windmill.model.geometry import GeometryConstants, blade_outlines, pillar_path
from windmill.model.path import Path
from windmill.view.surfaces import Surface


def draw_pivot(surface: Surface, constants: GeometryConstants, color: Rgba) -> None:
    surface.fill_circle(constants.center_x, constants.center_y, constants.pivot_radius, color)


def draw_blades(surface: Surface, constants: GeometryConstants, angle_deg: float, color: Rgba) -> None:
    for outline in blade_outlines(constants, angle_deg):
        surface.fill_path(Path().add_polygon(outline), color)


def draw_pillar(surface: Surface, constants: GeometryConstants, height: float, color: Rgba) -> None:
    surface.fill_path(pillar_path(constants, height), color)


def render(
    surface: Surface,
    constants: GeometryConstants,
    angle_deg: float,
    color: Rgba,
    height: float
) -> None:
    """
    Render a full frame.

    Args:
        surface: Target surface.
        constants: Layout from `geometry.recompute`.
        angle_deg: Current rotation phase of the first blade.
        color: Fill color shared by every shape.
        height: Surface height, the pillar reaches down to it.
    """
    draw_pivot(surface, constants, color)
    draw_blades(surface, constants, angle_deg, color)
    draw_pillar(surface, constants, height, color)
