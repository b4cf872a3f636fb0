"""Font resource for laying out and rasterizing glyphs.

This module provides the FontResource class which wraps a fonttools TTFont
and answers the questions lettering needs: which glyph draws a character,
how far the pen advances, how much a pair is kerned, where the glyph's
pixels fall and how much of each pixel it covers.

Sizes are pixel heights: a size of S maps the font's ascent-to-descent span
onto S pixels. Positions are in y-down pixel space with the glyph origin on
the baseline.
"""

from pathlib import Path

import numpy as np
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.freetypePen import FreeTypePen
from fontTools.ttLib import TTFont

from felt.domain.glyph import PixelBox
from felt.exceptions import FontLoadError
from felt.io.kerning import KerningTable

Bounds = tuple[float, float, float, float]


class FontResource:
    """Read-only access to a font's outlines and metrics.

    Example:
        font = FontResource.open(Path("font.ttf"))
        name = font.glyph_name("A")
        advance = font.advance_width(name, size=114.84)
        mask = font.coverage(name, size=114.84, position=(0.0, 0.0))
    """

    def __init__(self, font: TTFont, source: str = "<memory>") -> None:
        """Initialize the font resource.

        Args:
            font: Loaded fonttools font
            source: Where the font came from, used in error messages

        Raises:
            ValueError: If the font's vertical metrics are unusable
        """
        self._font = font
        self.source = source

        hhea = font["hhea"]
        self._height_units = hhea.ascent - hhea.descent
        if self._height_units <= 0:
            raise ValueError(
                f"hhea ascent ({hhea.ascent}) must lie above descent ({hhea.descent})"
            )

        self._cmap = font.getBestCmap() or {}
        self._notdef = font.getGlyphOrder()[0]
        self._glyph_set = font.getGlyphSet()
        self._metrics = font["hmtx"].metrics
        self._kerning = KerningTable.from_font(font)
        self._bounds: dict[str, Bounds | None] = {}

    @classmethod
    def open(cls, path: Path) -> "FontResource":
        """Load a TTF/OTF font file, or the first face of a collection.

        Args:
            path: Path to the font file

        Returns:
            The loaded font resource

        Raises:
            FontLoadError: If the file is missing or cannot be parsed
        """
        if not path.exists():
            raise FontLoadError(str(path), "file not found")

        try:
            font = TTFont(str(path), fontNumber=0)
            return cls(font, source=str(path))
        except Exception as e:
            raise FontLoadError(str(path), str(e) or type(e).__name__) from e

    @property
    def kerning_pairs(self) -> int:
        """Number of kerning sources (pairs or GPOS subtables) in the font."""
        return len(self._kerning)

    def scale(self, size: float) -> float:
        """Pixels per font unit at the given pixel size."""
        return size / self._height_units

    def glyph_name(self, char: str) -> str:
        """Get the glyph drawing a character.

        Characters the font does not map are drawn with its .notdef glyph.
        """
        return self._cmap.get(ord(char), self._notdef)

    def advance_width(self, name: str, size: float) -> float:
        """Horizontal advance of a glyph in pixels."""
        advance, _lsb = self._metrics.get(name, (0, 0))
        return advance * self.scale(size)

    def kerning(self, left: str, right: str, size: float) -> float:
        """Kerning adjustment between two glyphs in pixels."""
        return self._kerning.get(left, right) * self.scale(size)

    def bounds(self, name: str) -> Bounds | None:
        """Control box of a glyph in font units, None for empty glyphs."""
        if name not in self._bounds:
            pen = ControlBoundsPen(self._glyph_set)
            self._glyph_set[name].draw(pen)
            self._bounds[name] = pen.bounds
        return self._bounds[name]

    def pixel_box(
        self,
        name: str,
        size: float,
        position: tuple[float, float],
    ) -> PixelBox | None:
        """Pixel bounding box of a glyph placed at a position.

        Args:
            name: Glyph name
            size: Pixel size
            position: Glyph origin (x, baseline y) in pixels

        Returns:
            Box of all pixels the outline can touch, or None if it has no ink
        """
        bounds = self.bounds(name)
        if bounds is None:
            return None

        x_min, y_min, x_max, y_max = bounds
        s = self.scale(size)
        x, y = position
        return PixelBox.enclosing(
            x + x_min * s,
            y - y_max * s,
            x + x_max * s,
            y - y_min * s,
        )

    def coverage(
        self,
        name: str,
        size: float,
        position: tuple[float, float],
    ) -> np.ndarray | None:
        """Rasterize a glyph into an anti-aliased coverage array.

        The array spans the glyph's pixel box: element [dy, dx] is the share of
        pixel (box.left + dx, box.top + dy) covered by the outline.

        Args:
            name: Glyph name
            size: Pixel size
            position: Glyph origin (x, baseline y) in pixels

        Returns:
            Float array of shape (box.height, box.width) with values in [0, 1],
            or None if the glyph has no ink
        """
        box = self.pixel_box(name, size, position)
        if box is None:
            return None

        pen = FreeTypePen(self._glyph_set)
        self._glyph_set[name].draw(pen)

        # FreeType puts the outline origin at the bitmap's bottom-left corner
        s = self.scale(size)
        x, y = position
        transform = (s, 0, 0, s, x - box.left, box.bottom - y)
        return pen.array(width=box.width, height=box.height, transform=transform)

    def close(self) -> None:
        """Close the underlying font file."""
        self._font.close()
