"""
wordmarks.py — Type-led templates: wordmark, stacked wordmark, gradient wordmark.
"""

from typing import Tuple
from xml.etree.ElementTree import SubElement

from ..engine.data_models import BrandConcept
from ..engine.primitives import format_px
from ..engine.typography import map_font
from .common import (
    CANVAS_WIDTH,
    CENTER_X,
    TEXT_LIGHT,
    add_text,
    font_size_for,
    new_canvas,
    resolve_palette,
    safe_name,
    to_markup,
    truncate,
)


# =============================================================================
# WORDMARK
# =============================================================================

WORDMARK_TIERS = ((6, 56), (10, 46), (14, 36), (20, 28))


def render_wordmark(concept: BrandConcept, brand_name: str) -> str:
    """Brand name centered in full, underline, logo style as caption."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    add_text(svg, CENTER_X, 72, name, font_size_for(name, WORDMARK_TIERS, 22),
             TEXT_LIGHT, font=font)

    SubElement(svg, "rect", {
        "x": "150", "y": "104", "width": "100", "height": "3", "rx": "1.5",
        "fill": palette.primary,
    })
    SubElement(svg, "circle", {"cx": "258", "cy": "105.5", "r": "3", "fill": palette.secondary})

    caption = truncate(concept.logo_style, 40).upper()
    if caption:
        add_text(svg, CENTER_X, 130, caption, 11, palette.secondary, letter_spacing="0.3em")

    return to_markup(svg)


# =============================================================================
# STACKED WORDMARK
# =============================================================================

STACKED_TIERS = ((6, 44), (10, 34), (14, 26))


def split_lines(name: str) -> Tuple[str, str]:
    """
    Split a name over two lines.

    Multi-word names break at the word midpoint (the first line takes the
    extra word); single words break at the character midpoint.
    """
    words = name.split()
    if len(words) > 1:
        cut = (len(words) + 1) // 2
        return " ".join(words[:cut]), " ".join(words[cut:])
    cut = (len(name) + 1) // 2
    return name[:cut], name[cut:]


def render_stacked_wordmark(concept: BrandConcept, brand_name: str) -> str:
    """Name over two lines with a rule between them."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    top, bottom = split_lines(name)
    size = font_size_for(max(top, bottom, key=len), STACKED_TIERS, 20)

    svg = new_canvas()
    add_text(svg, CENTER_X, 54, top.upper(), size, TEXT_LIGHT, font=font)
    SubElement(svg, "line", {
        "x1": "120", "y1": "82", "x2": "280", "y2": "82",
        "stroke": palette.primary, "stroke-width": "2", "stroke-linecap": "round",
    })
    add_text(svg, CENTER_X, 112, bottom.upper(), size, palette.primary, font=font)

    return to_markup(svg)


# =============================================================================
# GRADIENT WORDMARK
# =============================================================================

GRADIENT_TIERS = ((6, 60), (10, 48), (14, 38), (20, 28))
GRADIENT_ID = "gradient-wordmark-fill"


def render_gradient_wordmark(concept: BrandConcept, brand_name: str) -> str:
    """Name filled with a primary → tertiary → secondary gradient."""
    name = safe_name(brand_name)
    palette = resolve_palette(concept)
    font = map_font(concept.font_style)

    svg = new_canvas()
    defs = SubElement(svg, "defs")
    gradient = SubElement(defs, "linearGradient", {
        "id": GRADIENT_ID, "x1": "0%", "y1": "0%", "x2": "100%", "y2": "0%",
    })
    for offset, color in (("0%", palette.primary), ("50%", palette.tertiary),
                          ("100%", palette.secondary)):
        SubElement(gradient, "stop", {"offset": offset, "stop-color": color})

    fill = f"url(#{GRADIENT_ID})"
    add_text(svg, CENTER_X, 70, name, font_size_for(name, GRADIENT_TIERS, 22), fill, font=font)

    underline_width = 180
    SubElement(svg, "rect", {
        "x": format_px((CANVAS_WIDTH - underline_width) / 2), "y": "102",
        "width": str(underline_width), "height": "4", "rx": "2",
        "fill": fill,
    })

    caption = truncate(concept.font_style, 36)
    if caption:
        add_text(svg, CENTER_X, 132, caption, 10, TEXT_LIGHT,
                 letter_spacing="0.1em", opacity="0.7")

    return to_markup(svg)
