"""Domain models for felt.

This module contains the value types shared by layout and rendering. All
models are immutable (frozen dataclasses and enums) and independent of
fontTools and Pillow.

Key classes:
- Color: The two inks used for lettering
- FontRole: Handle of a font in a board's registry
- PixelBox: Integer pixel bounding box
- GlyphInstance: A glyph placed on a line
"""

from felt.domain.color import Color
from felt.domain.glyph import FontRole, GlyphInstance, PixelBox

__all__: list[str] = [
    # Enums
    "Color",
    "FontRole",
    # Core types
    "GlyphInstance",
    "PixelBox",
]
