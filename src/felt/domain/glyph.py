"""Positioned glyph representation.

A GlyphInstance is one placed outline of the lettering: a glyph from one of
the board's fonts, anchored on the pen position and tagged with its ink.
Fonts are referenced by role rather than by object so laid out lettering
stays a plain value that can be copied or passed around freely.
"""

import math
from dataclasses import dataclass
from enum import IntEnum

from felt.domain.color import Color


class FontRole(IntEnum):
    """Index of a font in a board's font registry."""

    MAIN = 0
    SHADOW = 1


@dataclass(frozen=True)
class PixelBox:
    """Integer pixel bounding box, y growing downwards.

    Attributes:
        left: Leftmost pixel column (inclusive)
        top: Topmost pixel row (inclusive)
        right: Column past the rightmost pixel (exclusive)
        bottom: Row past the lowest pixel (exclusive)
    """

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @classmethod
    def enclosing(
        cls,
        x_min: float,
        y_min: float,
        x_max: float,
        y_max: float,
    ) -> "PixelBox | None":
        """Smallest pixel box enclosing a box given in y-down pixel space.

        Returns:
            The box, or None when it covers no pixel
        """
        box = cls(
            left=math.floor(x_min),
            top=math.floor(y_min),
            right=math.ceil(x_max),
            bottom=math.ceil(y_max),
        )
        if box.width <= 0 or box.height <= 0:
            return None
        return box


@dataclass(frozen=True)
class GlyphInstance:
    """A glyph placed on a line of lettering.

    Attributes:
        font: Role of the font the outline comes from
        name: Glyph name in that font
        x: Pen x position of the glyph origin (subpixel)
        y: Baseline y position of the glyph origin (subpixel)
        size: Pixel size the outline is scaled to
        color: Ink used to draw the glyph
        box: Pixel bounding box, None for glyphs without ink
    """

    font: FontRole
    name: str
    x: float
    y: float
    size: float
    color: Color
    box: PixelBox | None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def has_ink(self) -> bool:
        """Check if the glyph covers any pixel."""
        return self.box is not None
