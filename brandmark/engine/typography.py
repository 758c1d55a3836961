"""
typography.py — Font-style text to typography parameters.

Rules are evaluated in order against the lower-cased description and a
later matching rule overrides an earlier one for the attribute it sets.
"""

from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple

from .data_models import FontSpec


DEFAULT_FONT = FontSpec(family_class="sans", weight=700, letter_spacing="0.02em")


def _has_any(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(k in text for k in keywords)


def _is_serif(text: str) -> bool:
    return "serif" in text and "sans" not in text


# (predicate, overrides) pairs; the last match wins per attribute.
FONT_RULES: List[Tuple[Callable[[str], bool], Dict[str, object]]] = [
    (_is_serif, {"family_class": "serif"}),
    (_has_any("mono", "code"), {"family_class": "monospace", "letter_spacing": "0.05em"}),
    (_has_any("light", "thin"), {"weight": 300}),
    (_has_any("bold", "heavy", "black"), {"weight": 800}),
    (_has_any("medium"), {"weight": 500}),
    (_has_any("wide", "spaced", "tracking"), {"letter_spacing": "0.12em"}),
    (_has_any("condensed", "narrow", "tight"), {"letter_spacing": "-0.02em"}),
]


def map_font(font_style: Optional[str]) -> FontSpec:
    """
    Map a font-style description to a FontSpec.

    Args:
        font_style: Free-text typography description (may be empty)

    Returns:
        FontSpec with family class, weight and letter spacing
    """
    text = (font_style or "").lower()
    spec = DEFAULT_FONT

    for predicate, overrides in FONT_RULES:
        if predicate(text):
            spec = replace(spec, **overrides)

    return spec
