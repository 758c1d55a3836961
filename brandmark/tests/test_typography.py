"""
test_typography.py — Tests for font-style mapping.

Tests:
- Default font
- Family class rules
- Weight rules and their precedence
- Letter spacing rules and their precedence
"""

from brandmark.engine.data_models import FontSpec
from brandmark.engine.typography import DEFAULT_FONT, map_font


class TestDefaults:
    """Empty or unmatched descriptions."""

    def test_empty(self):
        """Test empty description gives the default font."""
        assert map_font("") == FontSpec("sans", 700, "0.02em")

    def test_none(self):
        """Test missing description."""
        assert map_font(None) == DEFAULT_FONT

    def test_unmatched(self):
        """Test description with no keyword."""
        assert map_font("friendly and playful") == DEFAULT_FONT


class TestFamily:
    """Family class selection."""

    def test_serif(self):
        """Test serif without sans."""
        spec = map_font("Elegant Serif")
        assert spec.family_class == "serif"
        assert spec.font_family.endswith("serif")
        assert "Georgia" in spec.font_family

    def test_sans_serif_stays_sans(self):
        """Test 'sans-serif' is not treated as serif."""
        assert map_font("clean sans-serif").family_class == "sans"

    def test_monospace(self):
        """Test mono keyword sets family and spacing."""
        spec = map_font("monospace")
        assert spec.family_class == "monospace"
        assert spec.letter_spacing == "0.05em"

    def test_code_overrides_serif(self):
        """Test monospace rule is applied after serif."""
        assert map_font("serif code font").family_class == "monospace"


class TestWeight:
    """Weight selection and precedence."""

    def test_light(self):
        assert map_font("light").weight == 300

    def test_thin(self):
        assert map_font("thin strokes").weight == 300

    def test_bold(self):
        assert map_font("bold").weight == 800

    def test_black(self):
        assert map_font("black display").weight == 800

    def test_medium(self):
        assert map_font("medium").weight == 500

    def test_bold_overrides_light(self):
        """Test a later weight rule wins."""
        assert map_font("light but bold").weight == 800

    def test_medium_overrides_bold(self):
        """Test medium is the last weight rule."""
        assert map_font("bold medium").weight == 500


class TestLetterSpacing:
    """Letter spacing selection and precedence."""

    def test_wide(self):
        assert map_font("wide tracking").letter_spacing == "0.12em"

    def test_condensed(self):
        assert map_font("condensed").letter_spacing == "-0.02em"

    def test_wide_overrides_mono(self):
        """Test spacing rule after the monospace rule wins."""
        spec = map_font("mono, spaced out")
        assert spec.family_class == "monospace"
        assert spec.letter_spacing == "0.12em"

    def test_narrow_overrides_wide(self):
        """Test narrow rule is last."""
        assert map_font("wide yet narrow").letter_spacing == "-0.02em"

    def test_combined(self):
        """Test every attribute can be set at once."""
        assert map_font("Light serif, wide tracking") == FontSpec("serif", 300, "0.12em")
