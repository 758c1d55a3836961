"""
catalog.py — The closed set of ten logo templates and their dispatcher.

Usage:
    from brandmark.templates import generate, generate_variants

    svg = generate("emblem", concept, "Nova Tech")
    variants = generate_variants(concept, "Nova Tech")   # ten, fixed order
"""

from typing import Callable, Dict, List, Optional, Tuple, Union

from ..engine.data_models import BrandConcept, LogoVariant, StyleType
from .badges import render_emblem, render_icon_wordmark, render_mascot_badge
from .marks import (
    render_abstract_mark,
    render_lettermark,
    render_monogram,
    render_negative_space,
)
from .wordmarks import render_gradient_wordmark, render_stacked_wordmark, render_wordmark


TemplateFn = Callable[[BrandConcept, str], str]


class UnknownStyleError(ValueError):
    """Raised when a style id is not one of the ten catalog styles."""

    def __init__(self, style_type: object):
        self.style_type = style_type
        valid = ", ".join(s.value for s in StyleType)
        super().__init__(f"Unknown logo style '{style_type}'. Expected one of: {valid}")


# Catalog order is the order variants are presented in.
TEMPLATES: Tuple[Tuple[StyleType, TemplateFn], ...] = (
    (StyleType.WORDMARK, render_wordmark),
    (StyleType.LETTERMARK, render_lettermark),
    (StyleType.EMBLEM, render_emblem),
    (StyleType.ICON_WORDMARK, render_icon_wordmark),
    (StyleType.MONOGRAM, render_monogram),
    (StyleType.ABSTRACT_MARK, render_abstract_mark),
    (StyleType.MASCOT_BADGE, render_mascot_badge),
    (StyleType.STACKED_WORDMARK, render_stacked_wordmark),
    (StyleType.NEGATIVE_SPACE, render_negative_space),
    (StyleType.GRADIENT_WORDMARK, render_gradient_wordmark),
)

_TEMPLATE_MAP: Dict[StyleType, TemplateFn] = dict(TEMPLATES)


def resolve_style(style_type: Union[StyleType, str]) -> StyleType:
    """Accept a StyleType or its string id."""
    if isinstance(style_type, StyleType):
        return style_type
    try:
        return StyleType(style_type)
    except (ValueError, TypeError):
        raise UnknownStyleError(style_type) from None


def generate(
    style_type: Union[StyleType, str],
    concept: Optional[BrandConcept],
    brand_name: Optional[str],
) -> str:
    """
    Render one logo style.

    Args:
        style_type: Which of the ten styles to render
        concept: Brand concept (None renders with every fallback)
        brand_name: Display name (empty renders as "Brand")

    Returns:
        Complete SVG markup

    Raises:
        UnknownStyleError: If style_type is not a catalog style
    """
    style = resolve_style(style_type)
    return _TEMPLATE_MAP[style](concept or BrandConcept(), brand_name or "")


def generate_variants(
    concept: Optional[BrandConcept],
    brand_name: Optional[str],
) -> List[LogoVariant]:
    """Render all ten styles in catalog order."""
    concept = concept or BrandConcept()
    return [
        LogoVariant(style_type=style, style_name=style.label,
                    markup=template(concept, brand_name or ""))
        for style, template in TEMPLATES
    ]


def list_styles() -> List[Tuple[str, str]]:
    """(style id, label) pairs in catalog order."""
    return [(style.value, style.label) for style, _ in TEMPLATES]
