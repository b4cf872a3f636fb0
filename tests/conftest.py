"""Shared fixtures: small synthetic fonts and boards.

The fonts span 1024 units from descent to ascent, so at a pixel size of 64
one pixel is exactly 16 font units and every rectangle below lands on whole
pixels.
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0
from PIL import Image

from felt.config import LayoutConfig
from felt.core import Background, Board
from felt.io import FontResource

GLYPH_SIZE = 64.0
ROW_HEIGHT = 16.0
TEST_LAYOUT = LayoutConfig(glyph_scale=4.0, rows_per_line=2)

Rect = tuple[int, int, int, int]

# name -> (rectangles in font units, advance width)
MAIN_GLYPHS: dict[str, tuple[list[Rect], int]] = {
    ".notdef": ([(32, 0, 288, 512)], 320),
    "space": ([], 256),
    "A": ([(32, 0, 352, 512)], 384),
    "V": ([(0, 0, 384, 512)], 384),
    "B": ([(0, 0, 160, 512), (224, 0, 320, 512)], 352),
}

# Shading: offset down and right, with advances the layout must ignore
SHADE_GLYPHS: dict[str, tuple[list[Rect], int]] = {
    ".notdef": ([(64, -64, 320, 480)], 1024),
    "space": ([], 1024),
    "A": ([(64, -64, 384, 480)], 1024),
    "V": ([(32, -64, 416, 480)], 1024),
    "B": ([(32, -64, 352, 480)], 1024),
}

CHARACTER_MAP = {ord(" "): "space", ord("A"): "A", ord("V"): "V", ord("B"): "B"}


def _rect_glyph(rects: list[Rect]):
    pen = TTGlyphPen(None)
    for x0, y0, x1, y1 in rects:
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_font(
    glyphs: dict[str, tuple[list[Rect], int]],
    kerning: dict[tuple[str, str], int] | None = None,
    features: str | None = None,
) -> TTFont:
    """Build an in-memory TrueType font out of rectangles."""
    builder = FontBuilder(1024, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap(CHARACTER_MAP)
    builder.setupGlyf({name: _rect_glyph(rects) for name, (rects, _) in glyphs.items()})
    builder.setupMaxp()
    builder.setupHorizontalMetrics(
        {
            name: (advance, min((r[0] for r in rects), default=0))
            for name, (rects, advance) in glyphs.items()
        }
    )
    builder.setupHorizontalHeader(ascent=768, descent=-256)
    builder.setupNameTable({"familyName": "Felt Test", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=768, sTypoDescender=-256, usWinAscent=768, usWinDescent=256)
    builder.setupPost()

    if kerning is not None:
        subtable = KernTable_format_0()
        subtable.version = 0
        subtable.format = 0
        subtable.coverage = 1
        subtable.kernTable = dict(kerning)
        kern = newTable("kern")
        kern.version = 0
        kern.kernTables = [subtable]
        builder.font["kern"] = kern

    if features is not None:
        builder.addOpenTypeFeatures(features)

    return builder.font


@pytest.fixture
def main_font() -> FontResource:
    """Letter font kerning A followed by V by -64 units (-4 px at size 64)."""
    return FontResource(build_font(MAIN_GLYPHS, kerning={("A", "V"): -64}), source="main")


@pytest.fixture
def shade_font() -> FontResource:
    """Shading font with oversized advances."""
    return FontResource(build_font(SHADE_GLYPHS), source="shade")


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """Letter font saved to disk."""
    path = tmp_path / "font.ttf"
    build_font(MAIN_GLYPHS).save(str(path))
    return path


@pytest.fixture
def shade_file(tmp_path: Path) -> Path:
    """Shading font saved to disk."""
    path = tmp_path / "shade.ttf"
    build_font(SHADE_GLYPHS).save(str(path))
    return path


@pytest.fixture
def solid_background() -> Background:
    """Plain 200x120 background with rows sized for 64 px glyphs."""
    image = Image.new("RGBA", (200, 120), (10, 20, 30, 255))
    return Background(image=image, row_height=ROW_HEIGHT)


@pytest.fixture
def board(solid_background: Background, main_font: FontResource, shade_font: FontResource) -> Board:
    """Unframed board with the synthetic fonts."""
    return Board(solid_background, None, main_font, shade_font, layout=TEST_LAYOUT)
