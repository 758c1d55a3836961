# Brandmark rendering engine

from .data_models import (
    BrandConcept,
    FontSpec,
    LogoVariant,
    ShapeCategory,
    StyleType,
    STYLE_LABELS,
)

from .shape_classifier import (
    classify,
    SHAPE_RULES,
    DEFAULT_SHAPE,
)

from .typography import (
    map_font,
    FONT_RULES,
    DEFAULT_FONT,
)

from .primitives import (
    build_icon,
    icon_markup,
    format_px,
    outer_radius,
    SVG_NS,
)

__all__ = [
    # Data models
    'BrandConcept',
    'FontSpec',
    'LogoVariant',
    'ShapeCategory',
    'StyleType',
    'STYLE_LABELS',
    # Classifiers
    'classify',
    'SHAPE_RULES',
    'DEFAULT_SHAPE',
    'map_font',
    'FONT_RULES',
    'DEFAULT_FONT',
    # Primitives
    'build_icon',
    'icon_markup',
    'format_px',
    'outer_radius',
    'SVG_NS',
]
