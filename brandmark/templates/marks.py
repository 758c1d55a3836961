"""
marks.py — Symbol-led templates: lettermark, monogram, abstract mark, negative space.
"""

from xml.etree.ElementTree import SubElement

from ..engine.data_models import BrandConcept
from ..engine.shape_classifier import classify
from ..engine.typography import map_font
from .common import (
    BACKGROUND,
    CENTER_X,
    CENTER_Y,
    TEXT_LIGHT,
    add_text,
    font_size_for,
    lettermark_initials,
    new_canvas,
    place_icon,
    resolve_palette,
    safe_name,
    to_markup,
    truncate,
    word_initials,
)


# Name set beside a symbol, left-aligned from x=156..170.
SIDE_NAME_TIERS = ((6, 40), (10, 30), (14, 24), (18, 20))


# =============================================================================
# LETTERMARK
# =============================================================================

def render_lettermark(concept: BrandConcept, brand_name: str) -> str:
    """One or two initials inside a ringed circle."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)
    initials = lettermark_initials(name)

    svg = new_canvas()
    SubElement(svg, "circle", {
        "cx": "200", "cy": "80", "r": "66",
        "fill": "none", "stroke": palette.secondary, "stroke-width": "2",
    })
    SubElement(svg, "circle", {"cx": "200", "cy": "80", "r": "56", "fill": palette.primary})
    add_text(svg, CENTER_X, CENTER_Y, initials, 52 if len(initials) == 1 else 44,
             TEXT_LIGHT, font=font, letter_spacing="0.02em")

    return to_markup(svg)


# =============================================================================
# MONOGRAM
# =============================================================================

MONOGRAM_LETTER_SIZES = {1: 64, 2: 48, 3: 36}


def render_monogram(concept: BrandConcept, brand_name: str) -> str:
    """Up to three initials in a bordered square, name and style beside."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)
    initials = word_initials(name, limit=3)

    svg = new_canvas()
    SubElement(svg, "rect", {
        "x": "24", "y": "24", "width": "112", "height": "112", "rx": "4",
        "fill": "none", "stroke": palette.primary, "stroke-width": "2",
    })
    add_text(svg, 80, 80, initials, MONOGRAM_LETTER_SIZES.get(len(initials), 36),
             palette.primary, font=font)

    add_text(svg, 156, 72, name, font_size_for(name, SIDE_NAME_TIERS, 16),
             TEXT_LIGHT, font=font, anchor="start")
    caption = truncate(concept.logo_style, 30).upper()
    if caption:
        add_text(svg, 158, 104, caption, 10, palette.secondary,
                 anchor="start", letter_spacing="0.2em")

    return to_markup(svg)


# =============================================================================
# ABSTRACT MARK
# =============================================================================

def render_abstract_mark(concept: BrandConcept, brand_name: str) -> str:
    """Overlapping translucent circles with a solid accent, name beside."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    mark = SubElement(svg, "g", {"class": "abstract-mark"})
    SubElement(mark, "circle", {"cx": "66", "cy": "80", "r": "40",
                                "fill": palette.primary, "opacity": "0.75"})
    SubElement(mark, "circle", {"cx": "100", "cy": "80", "r": "40",
                                "fill": palette.secondary, "opacity": "0.75"})
    SubElement(mark, "circle", {"cx": "124", "cy": "46", "r": "12",
                                "fill": palette.tertiary})

    add_text(svg, 160, 80, name, font_size_for(name, SIDE_NAME_TIERS, 16),
             TEXT_LIGHT, font=font, anchor="start")

    return to_markup(svg)


# =============================================================================
# NEGATIVE SPACE
# =============================================================================

NEGATIVE_NAME_TIERS = ((8, 18), (14, 14))


def render_negative_space(concept: BrandConcept, brand_name: str) -> str:
    """White icon knocked out of a primary block, name underneath."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas(BACKGROUND)
    block = SubElement(svg, "g", {"style": "isolation:isolate"})
    SubElement(block, "rect", {
        "x": "152", "y": "10", "width": "96", "height": "96", "rx": "12",
        "fill": palette.primary,
    })
    place_icon(block, classify(concept.icon_concept), TEXT_LIGHT, 80, 160, 18,
               style="mix-blend-mode:difference")

    add_text(svg, CENTER_X, 134, truncate(name, 32).upper(),
             font_size_for(name, NEGATIVE_NAME_TIERS, 11), TEXT_LIGHT,
             font=font, letter_spacing="0.2em")

    return to_markup(svg)
