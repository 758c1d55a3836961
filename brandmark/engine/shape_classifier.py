"""
shape_classifier.py — Icon-concept text to shape category.

Free text such as "a flowing river curve" is matched against ordered
keyword groups. Groups are checked top to bottom and the first group with
a keyword contained in the text wins, so "a wavy star icon" is a wave.
Keywords are stems where the word inflects ("wav" matches wave, wavy,
waving).
Text that matches nothing is ABSTRACT.
"""

from typing import List, Optional, Tuple

from .data_models import ShapeCategory


# =============================================================================
# KEYWORD RULES (priority order)
# =============================================================================

SHAPE_RULES: List[Tuple[Tuple[str, ...], ShapeCategory]] = [
    (("wav", "flow", "curve"), ShapeCategory.WAVE),
    (("star", "spark", "shine"), ShapeCategory.STAR),
    (("hex", "honeycomb"), ShapeCategory.HEXAGON),
    (("diamond", "gem", "crystal"), ShapeCategory.DIAMOND),
    (("triangle", "arrow", "peak", "mountain"), ShapeCategory.TRIANGLE),
    (("circle", "round", "globe", "sphere"), ShapeCategory.CIRCLE),
    (("square", "block", "box"), ShapeCategory.SQUARE),
    (("bolt", "lightning", "energy"), ShapeCategory.BOLT),
    (("cross", "plus", "health"), ShapeCategory.CROSS),
]

DEFAULT_SHAPE = ShapeCategory.ABSTRACT


def classify(icon_concept: Optional[str]) -> ShapeCategory:
    """
    Classify an icon concept description into a shape category.

    Args:
        icon_concept: Free-text description of the icon motif (may be empty)

    Returns:
        The category of the first matching keyword group, else ABSTRACT
    """
    text = (icon_concept or "").lower()
    if not text:
        return DEFAULT_SHAPE

    for keywords, category in SHAPE_RULES:
        if any(keyword in text for keyword in keywords):
            return category

    return DEFAULT_SHAPE
