# Brandmark logo templates

from .common import (
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    DEFAULT_PRIMARY,
    DEFAULT_SECONDARY,
    PLACEHOLDER_NAME,
    Palette,
    resolve_palette,
    lettermark_initials,
    word_initials,
)

from .catalog import (
    TEMPLATES,
    UnknownStyleError,
    generate,
    generate_variants,
    list_styles,
    resolve_style,
)

__all__ = [
    'CANVAS_WIDTH',
    'CANVAS_HEIGHT',
    'DEFAULT_PRIMARY',
    'DEFAULT_SECONDARY',
    'PLACEHOLDER_NAME',
    'Palette',
    'resolve_palette',
    'lettermark_initials',
    'word_initials',
    'TEMPLATES',
    'UnknownStyleError',
    'generate',
    'generate_variants',
    'list_styles',
    'resolve_style',
]
