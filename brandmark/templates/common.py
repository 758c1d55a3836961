"""
common.py — Canvas, palette fallbacks and text helpers shared by all templates.

Every template draws on the same 400 × 160 canvas. Colors missing from the
concept resolve to fixed fallbacks so a template never has to check for them.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element, SubElement

from ..engine.data_models import BrandConcept, FontSpec, ShapeCategory
from ..engine.primitives import SVG_NS, build_icon, format_px


# =============================================================================
# CONSTANTS
# =============================================================================

CANVAS_WIDTH = 400
CANVAS_HEIGHT = 160
CENTER_X = CANVAS_WIDTH / 2
CENTER_Y = CANVAS_HEIGHT / 2

DEFAULT_PRIMARY = "#D4AF37"     # Gold
DEFAULT_SECONDARY = "#8B5A2B"   # Brown
BACKGROUND = "#12121C"
TEXT_LIGHT = "#FFFFFF"

PLACEHOLDER_NAME = "Brand"
CAPTION_FONT = "'Helvetica Neue', Arial, sans-serif"

# Characters that are not allowed anywhere in an XML 1.0 document.
_XML_ILLEGAL = re.compile(
    r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)

FontTiers = Sequence[Tuple[int, float]]


# =============================================================================
# PALETTE
# =============================================================================

@dataclass(frozen=True)
class Palette:
    """Resolved colors for one rendering."""
    primary: str
    secondary: str
    tertiary: str


def resolve_palette(concept: BrandConcept) -> Palette:
    """
    Apply the color fallbacks to a concept.

    primary → gold, first secondary → brown, second secondary → primary.
    """
    primary = clean_text(concept.primary_color).strip() or DEFAULT_PRIMARY
    colors = [clean_text(c).strip() for c in concept.secondary_colors]
    secondary = colors[0] if colors and colors[0] else DEFAULT_SECONDARY
    tertiary = colors[1] if len(colors) > 1 and colors[1] else primary
    return Palette(primary=primary, secondary=secondary, tertiary=tertiary)


# =============================================================================
# TEXT HELPERS
# =============================================================================

def clean_text(text: Optional[str]) -> str:
    """Drop characters that cannot appear in XML."""
    if not text:
        return ""
    return _XML_ILLEGAL.sub("", str(text))


def safe_name(brand_name: Optional[str]) -> str:
    """Brand name with the placeholder substituted when empty."""
    return clean_text(brand_name).strip() or PLACEHOLDER_NAME


def lettermark_initials(name: str) -> str:
    """
    One or two initials for the lettermark.

    Multi-word names use the first letter of the first two words; a single
    word uses its first two characters.
    """
    words = name.split()
    if not words:
        return PLACEHOLDER_NAME[:2].upper()
    if len(words) == 1:
        return words[0][:2].upper()
    return (words[0][0] + words[1][0]).upper()


def word_initials(name: str, limit: int = 3) -> str:
    """One initial per word, capped at limit."""
    words = name.split() or [PLACEHOLDER_NAME]
    return "".join(word[0] for word in words[:limit]).upper()


def font_size_for(text: str, tiers: FontTiers, smallest: float) -> float:
    """Pick the first tier whose length limit fits the text."""
    length = len(text)
    for max_length, size in tiers:
        if length <= max_length:
            return size
    return smallest


def truncate(text: str, limit: int) -> str:
    """Shorten text to limit characters, marking the cut with an ellipsis."""
    text = " ".join(clean_text(text).split())
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


# =============================================================================
# ELEMENT HELPERS
# =============================================================================

def new_canvas(background: str = BACKGROUND) -> Element:
    """Create the root <svg> element with its background."""
    svg = Element("svg")
    svg.set("xmlns", SVG_NS)
    svg.set("width", str(CANVAS_WIDTH))
    svg.set("height", str(CANVAS_HEIGHT))
    svg.set("viewBox", f"0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}")

    SubElement(svg, "rect", {
        "x": "0", "y": "0",
        "width": str(CANVAS_WIDTH), "height": str(CANVAS_HEIGHT),
        "fill": background,
    })
    return svg


def add_text(
    parent: Element,
    x: float,
    y: float,
    content: str,
    size: float,
    fill: str,
    font: Optional[FontSpec] = None,
    anchor: str = "middle",
    letter_spacing: Optional[str] = None,
    **extra: str,
) -> Element:
    """
    Add a text element.

    When a FontSpec is given its family, weight and spacing are applied;
    otherwise the caption font is used at regular weight.
    """
    attrs = {
        "x": format_px(x),
        "y": format_px(y),
        "text-anchor": anchor,
        "dominant-baseline": "central",
        "font-size": format_px(size),
        "fill": fill,
    }
    if font is not None:
        attrs["font-family"] = font.font_family
        attrs["font-weight"] = str(font.weight)
        attrs["letter-spacing"] = letter_spacing or font.letter_spacing
    else:
        attrs["font-family"] = CAPTION_FONT
        attrs["font-weight"] = "400"
        if letter_spacing:
            attrs["letter-spacing"] = letter_spacing
    attrs.update(extra)

    text = SubElement(parent, "text", attrs)
    text.text = content
    return text


def place_icon(
    parent: Element,
    category: Union[ShapeCategory, str],
    color: str,
    size: float,
    x: float,
    y: float,
    **extra: str,
) -> Element:
    """Append an icon primitive with its box's top-left corner at (x, y)."""
    group = SubElement(parent, "g", {"transform": f"translate({format_px(x)} {format_px(y)})"})
    group.attrib.update(extra)
    group.append(build_icon(category, color, size))
    return group


def to_markup(svg: Element) -> str:
    """Serialize a finished canvas."""
    ET.indent(svg, space="  ")
    return ET.tostring(svg, encoding="unicode")
