"""Tests for domain models to verify they work correctly."""

import numpy as np
import pytest

from felt.domain import Color, FontRole, GlyphInstance, PixelBox


class TestColor:
    """Tests for Color inks."""

    def test_ink_values(self) -> None:
        """Test the two inks' RGB values."""
        assert Color.WHITE.rgb == (245, 245, 245)
        assert Color.LIGHT_GREY.rgb == (180, 180, 180)

    def test_rgba_full_coverage_is_opaque(self) -> None:
        """Test full coverage gives an opaque pixel of the ink."""
        assert Color.WHITE.rgba(1.0) == (245, 245, 245, 255)
        assert Color.LIGHT_GREY.rgba(1.0) == (180, 180, 180, 255)

    def test_rgba_no_coverage_is_transparent(self) -> None:
        """Test zero coverage keeps the hue but is transparent."""
        assert Color.WHITE.rgba(0.0) == (245, 245, 245, 0)

    def test_rgba_rounds_alpha(self) -> None:
        """Test partial coverage is rounded to the nearest alpha."""
        assert Color.LIGHT_GREY.rgba(0.25) == (180, 180, 180, 64)
        assert Color.WHITE.rgba(0.1) == (245, 245, 245, 26)

    def test_rgba_clamps_coverage(self) -> None:
        """Test coverage outside [0, 1] is clamped."""
        assert Color.WHITE.rgba(1.5)[3] == 255
        assert Color.WHITE.rgba(-0.5)[3] == 0

    def test_alpha_vectorized_matches_rgba(self) -> None:
        """Test the array form agrees with the scalar form."""
        coverage = np.array([[0.0, 0.1, 0.25], [0.6, 0.99, 1.0]])
        alpha = Color.alpha(coverage)

        assert alpha.dtype == np.uint8
        expected = [[Color.WHITE.rgba(v)[3] for v in row] for row in coverage.tolist()]
        assert alpha.tolist() == expected


class TestPixelBox:
    """Tests for PixelBox."""

    def test_enclosing_rounds_outwards(self) -> None:
        """Test fractional bounds expand to whole pixels."""
        box = PixelBox.enclosing(0.5, -10.2, 3.0, 0.0)
        assert box == PixelBox(left=0, top=-11, right=3, bottom=0)
        assert box.width == 3
        assert box.height == 11

    def test_enclosing_degenerate(self) -> None:
        """Test a box covering no pixel is None."""
        assert PixelBox.enclosing(1.0, 0.0, 1.0, 5.0) is None
        assert PixelBox.enclosing(0.0, 2.0, 4.0, 2.0) is None


class TestGlyphInstance:
    """Tests for GlyphInstance."""

    def test_glyph_instance(self) -> None:
        """Test glyph placement attributes."""
        glyph = GlyphInstance(
            font=FontRole.SHADOW,
            name="A",
            x=12.5,
            y=0.0,
            size=64.0,
            color=Color.LIGHT_GREY,
            box=PixelBox(14, -30, 34, 4),
        )
        assert glyph.position == (12.5, 0.0)
        assert glyph.has_ink()
        assert glyph.font == 1

    def test_inkless_glyph(self) -> None:
        """Test glyphs without a box have no ink."""
        glyph = GlyphInstance(FontRole.MAIN, "space", 0.0, 0.0, 64.0, Color.WHITE, None)
        assert not glyph.has_ink()

    def test_glyph_instance_immutable(self) -> None:
        """Test that glyph instances are immutable."""
        glyph = GlyphInstance(FontRole.MAIN, "A", 0.0, 0.0, 64.0, Color.WHITE, None)
        with pytest.raises(AttributeError):
            glyph.x = 3.0  # type: ignore
