"""Core rendering algorithms for felt.

This module contains the core algorithms for:

- Lettering layout (pen advance, kerning, multiple lines)
- Alpha compositing of glyph coverage onto the board
- Mirror tiling of the felt background
- Mitred picture frame borders
- Board orchestration

Key functions:
- overlay: Blend a translucent pixel over an opaque one
- overlay_coverage: Composite a glyph's coverage array onto a canvas
- tile_mirrored: Seamlessly tile a texture
- classify_regions: Assign framed pixels to border bands
- frame: Surround an image with a mitred border

Key classes:
- Cursor, Line, Lettering: Layout engine
- Background: Tiled felt texture with its row height
- Border: Frame texture
- Board: Immutable rendering configuration
- LetteredBoard: A phrase laid out on a board, ready to render
"""

from felt.core.board import Board, LetteredBoard
from felt.core.border import Border, Region, classify_regions, frame
from felt.core.compositor import blend, overlay, overlay_coverage
from felt.core.lettering import Cursor, Lettering, Line
from felt.core.tiler import Background, mirrored_columns, tile_mirrored

__all__ = [
    # Board classes
    "Background",
    "Board",
    "Border",
    # Layout classes
    "Cursor",
    "LetteredBoard",
    "Lettering",
    "Line",
    "Region",
    # Compositing functions
    "blend",
    "classify_regions",
    "frame",
    "mirrored_columns",
    "overlay",
    "overlay_coverage",
    "tile_mirrored",
]
