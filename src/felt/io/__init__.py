"""Asset I/O layer for felt.

This module handles reading fonts with fonttools and reading and writing
raster images with Pillow. It keeps both libraries out of the layout and
compositing code.

Key responsibilities:
- Load TTF/OTF fonts and expose glyph metrics, kerning and coverage
- Load background and border textures as RGBA
- Write the rendered board

Key classes and functions:
- FontResource: Glyph lookup, metrics and rasterization
- KerningTable: Pairwise kerning from 'kern' or GPOS
- open_image / save_image: Raster decode and encode
"""

from felt.io.font import FontResource
from felt.io.image import open_image, save_image
from felt.io.kerning import KerningTable

__all__ = [
    "FontResource",
    "KerningTable",
    "open_image",
    "save_image",
]
