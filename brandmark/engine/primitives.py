"""
primitives.py — Vector icon primitives for each shape category.

build_icon() returns an SVG <g> fragment, not a document. The fragment is
drawn in a size × size box centered at (size/2, size/2) with outer radius
r = round(0.38 * size); templates place it with a translate transform.

Usage:
    from brandmark.engine.primitives import build_icon

    icon = build_icon(ShapeCategory.STAR, "#D4AF37", 64)
    group.append(icon)
"""

import math
from typing import Iterable, List, Tuple, Union
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element, SubElement

from .data_models import ShapeCategory


# =============================================================================
# CONSTANTS
# =============================================================================

SVG_NS = "http://www.w3.org/2000/svg"

OUTER_RADIUS_RATIO = 0.38
STAR_INNER_RATIO = 0.45
RING_RATIO = 0.55
DIAMOND_WIDTH_RATIO = 0.7
SQUARE_HALF_RATIO = 0.75
SQUARE_CORNER_RATIO = 0.06
CROSS_THICKNESS_RATIO = 0.4
ABSTRACT_RADIUS_RATIO = 0.65

# Lightning bolt outline as (dx, dy) multiples of r from the center.
BOLT_OUTLINE = [
    (0.20, -1.00),
    (-0.50, 0.10),
    (0.00, 0.10),
    (-0.15, 1.00),
    (0.50, -0.20),
    (0.05, -0.20),
    (0.35, -1.00),
]


# =============================================================================
# GEOMETRY HELPERS
# =============================================================================

def format_px(value: float) -> str:
    """Format a coordinate for SVG (2 decimal places)."""
    return f"{value:.2f}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def outer_radius(size: float) -> int:
    """Outer radius used by every primitive for a given box size."""
    return round_half_up(OUTER_RADIUS_RATIO * size)


def polar_points(
    cx: float,
    cy: float,
    radii: Iterable[float],
    start_deg: float,
    step_deg: float,
) -> List[Tuple[float, float]]:
    """Points at successive angles, one per radius."""
    points = []
    for i, radius in enumerate(radii):
        angle = math.radians(start_deg + i * step_deg)
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def points_attr(points: Iterable[Tuple[float, float]]) -> str:
    """Serialize points for a polygon 'points' attribute."""
    return " ".join(f"{format_px(x)},{format_px(y)}" for x, y in points)


def _polygon(parent: Element, points, color: str) -> Element:
    return SubElement(parent, "polygon", {"points": points_attr(points), "fill": color})


# =============================================================================
# SHAPE BUILDERS
# =============================================================================

def _circle(g: Element, c: float, r: int, color: str, size: float) -> None:
    SubElement(g, "circle", {
        "cx": format_px(c), "cy": format_px(c), "r": format_px(r),
        "fill": color, "opacity": "0.9",
    })
    SubElement(g, "circle", {
        "cx": format_px(c), "cy": format_px(c), "r": format_px(RING_RATIO * r),
        "fill": "none", "stroke": "#FFFFFF", "stroke-opacity": "0.6",
        "stroke-width": format_px(max(1.0, size * 0.02)),
    })


def _wave(g: Element, c: float, r: int, color: str, size: float) -> None:
    bar = 0.28 * r
    for offset, width, opacity in ((-0.35, 2.0, "0.9"), (0.35, 1.5, "0.55")):
        SubElement(g, "rect", {
            "x": format_px(c - width * r / 2),
            "y": format_px(c + offset * r - bar / 2),
            "width": format_px(width * r),
            "height": format_px(bar),
            "rx": format_px(bar / 2),
            "fill": color,
            "opacity": opacity,
        })


def _star(g: Element, c: float, r: int, color: str, size: float) -> None:
    radii = [r if i % 2 == 0 else STAR_INNER_RATIO * r for i in range(10)]
    _polygon(g, polar_points(c, c, radii, -90, 36), color)


def _hexagon(g: Element, c: float, r: int, color: str, size: float) -> None:
    _polygon(g, polar_points(c, c, [r] * 6, -30, 60), color)


def _diamond(g: Element, c: float, r: int, color: str, size: float) -> None:
    half = DIAMOND_WIDTH_RATIO * r
    _polygon(g, [(c, c - r), (c + half, c), (c, c + r), (c - half, c)], color)


def _triangle(g: Element, c: float, r: int, color: str, size: float) -> None:
    _polygon(g, polar_points(c, c, [r] * 3, -90, 120), color)


def _square(g: Element, c: float, r: int, color: str, size: float) -> None:
    half = SQUARE_HALF_RATIO * r
    corner = SQUARE_CORNER_RATIO * size
    SubElement(g, "rect", {
        "x": format_px(c - half), "y": format_px(c - half),
        "width": format_px(2 * half), "height": format_px(2 * half),
        "rx": format_px(corner), "fill": color,
    })


def _bolt(g: Element, c: float, r: int, color: str, size: float) -> None:
    _polygon(g, [(c + dx * r, c + dy * r) for dx, dy in BOLT_OUTLINE], color)


def _cross(g: Element, c: float, r: int, color: str, size: float) -> None:
    t = CROSS_THICKNESS_RATIO * r
    for x, y, w, h in ((c - t / 2, c - r, t, 2 * r), (c - r, c - t / 2, 2 * r, t)):
        SubElement(g, "rect", {
            "x": format_px(x), "y": format_px(y),
            "width": format_px(w), "height": format_px(h),
            "rx": format_px(t / 4), "fill": color,
        })


def _abstract(g: Element, c: float, r: int, color: str, size: float) -> None:
    radius = ABSTRACT_RADIUS_RATIO * r
    for dx in (-0.35, 0.35):
        SubElement(g, "circle", {
            "cx": format_px(c + dx * r), "cy": format_px(c), "r": format_px(radius),
            "fill": color, "opacity": "0.7",
        })


SHAPE_BUILDERS = {
    ShapeCategory.CIRCLE: _circle,
    ShapeCategory.WAVE: _wave,
    ShapeCategory.STAR: _star,
    ShapeCategory.HEXAGON: _hexagon,
    ShapeCategory.DIAMOND: _diamond,
    ShapeCategory.TRIANGLE: _triangle,
    ShapeCategory.SQUARE: _square,
    ShapeCategory.BOLT: _bolt,
    ShapeCategory.CROSS: _cross,
    ShapeCategory.ABSTRACT: _abstract,
}


def _resolve_category(category: Union[ShapeCategory, str, None]) -> ShapeCategory:
    if isinstance(category, ShapeCategory):
        return category
    try:
        return ShapeCategory(category)
    except (ValueError, TypeError):
        return ShapeCategory.ABSTRACT


# =============================================================================
# PUBLIC API
# =============================================================================

def build_icon(
    category: Union[ShapeCategory, str, None],
    color: str,
    size: float,
) -> Element:
    """
    Build the icon primitive for a shape category.

    Args:
        category: Shape category (unknown values fall back to ABSTRACT)
        color: Fill color for the shape
        size: Edge length of the square box the icon is drawn in

    Returns:
        <g> element holding the shape, ready to append to a template
    """
    shape = _resolve_category(category)
    c = size / 2
    r = outer_radius(size)

    g = Element("g", {"class": f"icon icon-{shape.value}"})
    SHAPE_BUILDERS[shape](g, c, r, color, size)
    return g


def icon_markup(category: Union[ShapeCategory, str, None], color: str, size: float) -> str:
    """Serialize an icon fragment to a string."""
    return ET.tostring(build_icon(category, color, size), encoding="unicode")
