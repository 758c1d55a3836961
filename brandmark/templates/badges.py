"""
badges.py — Icon-led templates: emblem, icon + wordmark, mascot badge.

These three embed the icon primitive picked by the shape classifier.
"""

from xml.etree.ElementTree import SubElement

from ..engine.data_models import BrandConcept
from ..engine.primitives import points_attr, polar_points
from ..engine.shape_classifier import classify
from ..engine.typography import map_font
from .common import (
    CENTER_X,
    TEXT_LIGHT,
    add_text,
    font_size_for,
    new_canvas,
    place_icon,
    resolve_palette,
    safe_name,
    to_markup,
    truncate,
)


# =============================================================================
# EMBLEM
# =============================================================================

EMBLEM_TIERS = ((6, 18), (9, 14), (13, 11))
EMBLEM_CAPTION = "EST. 2024"


def render_emblem(concept: BrandConcept, brand_name: str) -> str:
    """Hexagonal badge with icon, uppercased name and founding line."""
    name = safe_name(brand_name).upper()
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    SubElement(svg, "polygon", {
        "points": points_attr(polar_points(200, 80, [74] * 6, -90, 60)),
        "fill": "none", "stroke": palette.primary, "stroke-width": "3",
    })
    SubElement(svg, "polygon", {
        "points": points_attr(polar_points(200, 80, [64] * 6, -90, 60)),
        "fill": palette.primary, "opacity": "0.15",
    })
    place_icon(svg, classify(concept.icon_concept), palette.primary, 36, 182, 24)

    add_text(svg, CENTER_X, 90, truncate(name, 20), font_size_for(name, EMBLEM_TIERS, 9),
             TEXT_LIGHT, font=font)
    add_text(svg, CENTER_X, 112, EMBLEM_CAPTION, 8, palette.secondary,
             letter_spacing="0.25em")

    return to_markup(svg)


# =============================================================================
# ICON + WORDMARK
# =============================================================================

ICON_WORDMARK_TIERS = ((6, 44), (10, 34), (14, 26), (18, 22))


def render_icon_wordmark(concept: BrandConcept, brand_name: str) -> str:
    """Icon on the left, divider, name and icon caption on the right."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    place_icon(svg, classify(concept.icon_concept), palette.primary, 96, 24, 32)
    SubElement(svg, "line", {
        "x1": "140", "y1": "40", "x2": "140", "y2": "120",
        "stroke": palette.secondary, "stroke-width": "2",
    })

    add_text(svg, 160, 74, name, font_size_for(name, ICON_WORDMARK_TIERS, 18),
             TEXT_LIGHT, font=font, anchor="start")
    caption = truncate(concept.icon_concept, 28)
    if caption:
        add_text(svg, 162, 108, caption, 11, palette.primary, anchor="start",
                 letter_spacing="0.05em")

    return to_markup(svg)


# =============================================================================
# MASCOT BADGE
# =============================================================================

MASCOT_TIERS = ((6, 22), (9, 18), (12, 14))


def render_mascot_badge(concept: BrandConcept, brand_name: str) -> str:
    """Round badge: icon on top, name across the middle, caption at the bottom."""
    name = safe_name(brand_name).upper()
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    SubElement(svg, "circle", {"cx": "200", "cy": "80", "r": "74", "fill": palette.primary})
    SubElement(svg, "circle", {
        "cx": "200", "cy": "80", "r": "66",
        "fill": "none", "stroke": palette.tertiary, "stroke-width": "2",
    })
    place_icon(svg, classify(concept.icon_concept), palette.secondary, 44, 178, 16)

    add_text(svg, CENTER_X, 86, truncate(name, 16), font_size_for(name, MASCOT_TIERS, 11),
             TEXT_LIGHT, font=font)
    caption = truncate(concept.logo_style, 22).upper()
    if caption:
        add_text(svg, CENTER_X, 122, caption, 8, TEXT_LIGHT,
                 letter_spacing="0.2em", opacity="0.85")

    return to_markup(svg)
