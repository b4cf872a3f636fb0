"""Picture frame border.

The rendered board is padded by the border tile's width on every side and
the padding is filled with the tile running along each edge. Corners are
split along 45 degree diagonals so the four edges meet in mitre joints.

Every output pixel belongs to exactly one region, tested in order:

- left:   x < Wb,      closer to the left edge than to the top, not farther than the bottom
- top:    y < Wb,      not farther from the top than from the left or right edges
- right:  x >= Wb+Wi,  closer to the right edge than to the bottom
- bottom: y >= Wb+Hi
- interior otherwise, showing the board itself

Left and right bands sample the tile as-is, the top and bottom bands sample
it rotated a quarter turn so the grain follows the edge.
"""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import numpy as np
from PIL import Image

from felt.io.image import open_image


class Region(IntEnum):
    """Part of a framed image a pixel belongs to."""

    INTERIOR = 0
    LEFT = 1
    TOP = 2
    RIGHT = 3
    BOTTOM = 4


def classify_regions(inner_size: tuple[int, int], border_width: int) -> np.ndarray:
    """Label every pixel of a framed image with its region.

    Args:
        inner_size: (width, height) of the image being framed
        border_width: Padding added on every side

    Returns:
        Integer array of shape (height, width) of the framed image holding
        Region values
    """
    inner_width, inner_height = inner_size
    width = inner_width + 2 * border_width
    height = inner_height + 2 * border_width

    y, x = np.indices((height, width))
    from_left, from_top = x, y
    from_right, from_bottom = width - 1 - x, height - 1 - y

    left = (x < border_width) & (from_left < from_top) & (from_left <= from_bottom)
    top = (y < border_width) & (from_top <= from_left) & (from_top <= from_right)
    right = (x >= border_width + inner_width) & (from_right < from_bottom)
    bottom = y >= border_width + inner_height

    return np.select(
        [left, top, right, bottom],
        [int(Region.LEFT), int(Region.TOP), int(Region.RIGHT), int(Region.BOTTOM)],
        default=int(Region.INTERIOR),
    )


def frame(inner: Image.Image, tile: Image.Image) -> Image.Image:
    """Surround an image with a mitred border.

    Args:
        inner: Image to frame
        tile: Border texture; its width sets the frame thickness

    Returns:
        RGBA image of size (Wi + 2*Wb, Hi + 2*Wb)
    """
    inner_pixels = np.asarray(inner.convert("RGBA"))
    tile_pixels = np.asarray(tile.convert("RGBA"))
    inner_height, inner_width = inner_pixels.shape[:2]
    tile_height, tile_width = tile_pixels.shape[:2]

    left = top = tile_width
    right = tile_width + inner_width
    bottom = tile_width + inner_height

    regions = classify_regions((inner_width, inner_height), tile_width)
    output = np.empty(regions.shape + (4,), dtype=np.uint8)

    def paint(region: Region, source: np.ndarray, sx: np.ndarray, sy: np.ndarray) -> None:
        mask = regions == region
        output[mask] = source[sy[mask], sx[mask]]

    y, x = np.indices(regions.shape)
    paint(Region.LEFT, tile_pixels, x, y % tile_height)
    paint(Region.TOP, tile_pixels, y, tile_height - 1 - x % tile_height)
    paint(Region.RIGHT, tile_pixels, x - right, y % tile_height)
    paint(Region.BOTTOM, tile_pixels, y - bottom, tile_height - 1 - x % tile_height)
    paint(Region.INTERIOR, inner_pixels, x - left, y - top)

    return Image.fromarray(output)


@dataclass(frozen=True)
class Border:
    """Texture tile used to frame rendered boards."""

    tile: Image.Image

    @property
    def width(self) -> int:
        return self.tile.width

    @classmethod
    def open(cls, path: Path) -> "Border":
        """Load a border texture.

        Raises:
            ImageLoadError: If the texture cannot be read
        """
        return cls(tile=open_image(path))

    def apply(self, inner: Image.Image) -> Image.Image:
        """Frame an image with this border."""
        return frame(inner, self.tile)
