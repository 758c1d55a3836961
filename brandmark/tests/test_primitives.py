"""
test_primitives.py — Tests for the vector icon primitives.

Tests:
- Geometry helpers
- Every category builds a well-formed fragment
- Per-shape geometry
- Unknown category fallback
"""

from xml.etree import ElementTree as ET

import pytest

from brandmark.engine.data_models import ShapeCategory
from brandmark.engine.primitives import (
    SHAPE_BUILDERS,
    build_icon,
    format_px,
    icon_markup,
    outer_radius,
    points_attr,
    polar_points,
    round_half_up,
)


def parse_svg(markup: str) -> ET.Element:
    """Parse an SVG fragment into an ElementTree element."""
    return ET.fromstring(markup)


def polygon_points(icon) -> list:
    """Points of the first polygon in an icon."""
    return icon.find("polygon").get("points").split()


# =============================================================================
# HELPER TESTS
# =============================================================================

class TestHelpers:
    """Test geometry helpers."""

    def test_format_px(self):
        assert format_px(12) == "12.00"
        assert format_px(3.14159) == "3.14"

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2

    def test_outer_radius(self):
        """Test r = round(0.38 * size)."""
        assert outer_radius(100) == 38
        assert outer_radius(64) == 24
        assert outer_radius(96) == 36

    def test_polar_points(self):
        points = polar_points(0, 0, [10, 10], 0, 90)
        assert points[0] == pytest.approx((10, 0))
        assert points[1] == pytest.approx((0, 10))

    def test_points_attr(self):
        assert points_attr([(1, 2), (3.456, 4)]) == "1.00,2.00 3.46,4.00"


# =============================================================================
# BUILD TESTS
# =============================================================================

class TestBuildIcon:
    """Test building icon fragments."""

    def test_every_category_has_builder(self):
        assert set(SHAPE_BUILDERS) == set(ShapeCategory)

    @pytest.mark.parametrize("category", list(ShapeCategory))
    def test_fragment_well_formed(self, category):
        """Test each category serializes to a parseable group."""
        root = parse_svg(icon_markup(category, "#D4AF37", 64))
        assert root.tag == "g"
        assert root.get("class") == f"icon icon-{category.value}"
        assert len(root) >= 1

    @pytest.mark.parametrize("category", list(ShapeCategory))
    def test_color_applied(self, category):
        markup = icon_markup(category, "#123456", 64)
        assert 'fill="#123456"' in markup

    def test_accepts_string_category(self):
        assert build_icon("star", "#000000", 64).get("class") == "icon icon-star"

    def test_unknown_category_is_abstract(self):
        assert build_icon("spiral", "#000000", 64).get("class") == "icon icon-abstract"

    def test_none_category_is_abstract(self):
        assert build_icon(None, "#000000", 64).get("class") == "icon icon-abstract"


# =============================================================================
# GEOMETRY TESTS
# =============================================================================

class TestShapeGeometry:
    """Test shape geometry for a 100px box (center 50, r 38)."""

    def test_star_has_ten_points(self):
        points = polygon_points(build_icon(ShapeCategory.STAR, "#fff", 100))
        assert len(points) == 10
        assert points[0] == "50.00,12.00"

    def test_star_inner_radius(self):
        """Test alternate points sit on the inner radius."""
        points = polygon_points(build_icon(ShapeCategory.STAR, "#fff", 100))
        x, y = (float(v) for v in points[5].split(","))
        assert ((x - 50) ** 2 + (y - 50) ** 2) ** 0.5 == pytest.approx(0.45 * 38, abs=0.01)

    def test_hexagon(self):
        points = polygon_points(build_icon(ShapeCategory.HEXAGON, "#fff", 100))
        assert len(points) == 6
        assert points[0] == "82.91,31.00"

    def test_diamond(self):
        points = polygon_points(build_icon(ShapeCategory.DIAMOND, "#fff", 100))
        assert points == ["50.00,12.00", "76.60,50.00", "50.00,88.00", "23.40,50.00"]

    def test_triangle(self):
        points = polygon_points(build_icon(ShapeCategory.TRIANGLE, "#fff", 100))
        assert len(points) == 3
        assert points[0] == "50.00,12.00"

    def test_bolt(self):
        assert len(polygon_points(build_icon(ShapeCategory.BOLT, "#fff", 100))) == 7

    def test_circle(self):
        icon = build_icon(ShapeCategory.CIRCLE, "#fff", 100)
        disc, ring = icon.findall("circle")
        assert disc.get("r") == "38.00"
        assert disc.get("opacity") == "0.9"
        assert ring.get("r") == "20.90"
        assert ring.get("fill") == "none"

    def test_square(self):
        rect = build_icon(ShapeCategory.SQUARE, "#fff", 100).find("rect")
        assert rect.get("width") == "57.00"
        assert rect.get("height") == "57.00"
        assert rect.get("rx") == "6.00"

    def test_cross(self):
        bars = build_icon(ShapeCategory.CROSS, "#fff", 100).findall("rect")
        assert len(bars) == 2
        assert bars[0].get("width") == "15.20"
        assert bars[1].get("height") == "15.20"

    def test_wave(self):
        bars = build_icon(ShapeCategory.WAVE, "#fff", 100).findall("rect")
        assert [b.get("opacity") for b in bars] == ["0.9", "0.55"]

    def test_abstract(self):
        discs = build_icon(ShapeCategory.ABSTRACT, "#fff", 100).findall("circle")
        assert len(discs) == 2
        assert all(d.get("r") == "24.70" for d in discs)
        assert all(d.get("opacity") == "0.7" for d in discs)
