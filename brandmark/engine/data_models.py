"""
data_models.py — Shared data models used by the engine, templates and export.

This module contains the dataclasses and enums that flow between the
classifiers, the primitive builder and the template catalog.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class ShapeCategory(Enum):
    """Icon shape categories produced by the shape classifier."""
    WAVE = "wave"
    STAR = "star"
    HEXAGON = "hexagon"
    DIAMOND = "diamond"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    SQUARE = "square"
    BOLT = "bolt"
    CROSS = "cross"
    ABSTRACT = "abstract"


class StyleType(Enum):
    """The ten logo styles, in catalog order."""
    WORDMARK = "wordmark"
    LETTERMARK = "lettermark"
    EMBLEM = "emblem"
    ICON_WORDMARK = "icon-wordmark"
    MONOGRAM = "monogram"
    ABSTRACT_MARK = "abstract-mark"
    MASCOT_BADGE = "mascot-badge"
    STACKED_WORDMARK = "stacked-wordmark"
    NEGATIVE_SPACE = "negative-space"
    GRADIENT_WORDMARK = "gradient-wordmark"

    @property
    def label(self) -> str:
        """Human readable name shown on the variant card."""
        return STYLE_LABELS[self]


STYLE_LABELS = {
    StyleType.WORDMARK: "Wordmark",
    StyleType.LETTERMARK: "Lettermark",
    StyleType.EMBLEM: "Emblem",
    StyleType.ICON_WORDMARK: "Icon + Wordmark",
    StyleType.MONOGRAM: "Monogram",
    StyleType.ABSTRACT_MARK: "Abstract Mark",
    StyleType.MASCOT_BADGE: "Mascot-Style Badge",
    StyleType.STACKED_WORDMARK: "Stacked Wordmark",
    StyleType.NEGATIVE_SPACE: "Negative Space Mark",
    StyleType.GRADIENT_WORDMARK: "Gradient Wordmark",
}


# =============================================================================
# INPUT DATA MODELS
# =============================================================================

# External contract uses camelCase; both spellings are accepted.
_CONCEPT_KEYS = {
    "iconConcept": "icon_concept",
    "fontStyle": "font_style",
    "logoStyle": "logo_style",
    "primaryColor": "primary_color",
    "secondaryColors": "secondary_colors",
    "backgroundStyle": "background_style",
}


@dataclass(frozen=True)
class BrandConcept:
    """
    Brand concept record supplied by the concept service.

    Every field may be empty. background_style is carried for display
    only and is never read by the renderer.
    """
    icon_concept: str = ""
    font_style: str = ""
    logo_style: str = ""
    primary_color: str = ""
    secondary_colors: Tuple[str, ...] = ()
    background_style: str = ""

    def __post_init__(self):
        # None -> "", other values -> str, any sequence -> tuple of str.
        for name in ("icon_concept", "font_style", "logo_style",
                     "primary_color", "background_style"):
            value = getattr(self, name)
            object.__setattr__(self, name, "" if value is None else str(value))
        colors = self.secondary_colors or ()
        if isinstance(colors, str) or not isinstance(colors, Iterable):
            colors = (colors,)
        object.__setattr__(
            self, "secondary_colors", tuple(str(c) for c in colors if c is not None)
        )

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "BrandConcept":
        """Create from a camelCase or snake_case mapping; unknown keys are ignored."""
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _CONCEPT_KEYS.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase external contract."""
        return {
            "iconConcept": self.icon_concept,
            "fontStyle": self.font_style,
            "logoStyle": self.logo_style,
            "primaryColor": self.primary_color,
            "secondaryColors": list(self.secondary_colors),
            "backgroundStyle": self.background_style,
        }


# =============================================================================
# DERIVED MODELS
# =============================================================================

@dataclass(frozen=True)
class FontSpec:
    """Typography parameters derived from a font-style description."""
    family_class: str = "sans"     # sans | serif | monospace
    weight: int = 700
    letter_spacing: str = "0.02em"

    @property
    def font_family(self) -> str:
        """CSS font stack for the family class."""
        return FONT_STACKS.get(self.family_class, FONT_STACKS["sans"])


FONT_STACKS = {
    "sans": "'Helvetica Neue', Arial, sans-serif",
    "serif": "Georgia, 'Times New Roman', serif",
    "monospace": "'Courier New', Courier, monospace",
}


@dataclass(frozen=True)
class LogoVariant:
    """One rendered logo style for a (concept, brand name) pair."""
    style_type: StyleType
    style_name: str
    markup: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "style_type": self.style_type.value,
            "style_name": self.style_name,
            "markup": self.markup,
        }
