"""Seamless background tiling.

A small felt texture is repeated to cover the board. Horizontally the tile
alternates between its normal and mirrored orientation, so neighbouring
copies meet on matching columns and no seam shows:

    period = 2W - 1
    x' = x mod period          if x mod period < W
    x' = period - x mod period otherwise

Vertically the texture simply repeats (y' = y mod H); the felt grooves run
horizontally and already line up.
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import structlog
from PIL import Image

from felt.config import BackgroundConfig
from felt.io.image import open_image

logger = structlog.get_logger(__name__)


def mirrored_columns(tile_width: int, width: int) -> np.ndarray:
    """Source column for every destination column.

    Args:
        tile_width: Width W of the source tile
        width: Number of destination columns

    Returns:
        Integer array of length width with values in [0, W)
    """
    period = 2 * tile_width - 1
    columns = np.arange(width) % period
    return np.where(columns < tile_width, columns, period - columns)


def tile_mirrored(source: Image.Image, width: int, height: int) -> Image.Image:
    """Cover a width x height area with mirror-tiled copies of source.

    Args:
        source: Tile image
        width: Output width in pixels
        height: Output height in pixels

    Returns:
        New image in the source's mode
    """
    pixels = np.asarray(source)
    tile_height, tile_width = pixels.shape[:2]

    rows = np.arange(height) % tile_height
    columns = mirrored_columns(tile_width, width)
    return Image.fromarray(pixels[rows[:, np.newaxis], columns[np.newaxis, :]])


@dataclass(frozen=True)
class Background:
    """Tiled felt texture the lettering is pinned to.

    Attributes:
        image: Opaque RGBA board image
        row_height: Pixel spacing of the felt rows, the unit lettering is sized in
    """

    image: Image.Image
    row_height: float

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @classmethod
    def from_texture(cls, texture: Image.Image, config: BackgroundConfig) -> "Background":
        """Downsample a texture and tile it into a board.

        Args:
            texture: Felt texture at native resolution
            config: Downsampling and tiling settings

        Returns:
            Background sized tiles_x by tiles_y downsampled textures
        """
        width = max(texture.width // config.downsample, 1)
        height = max(texture.height // config.downsample, 1)
        tile = texture.convert("RGBA").resize(
            (width, height), resample=Image.Resampling.LANCZOS
        )
        image = tile_mirrored(tile, config.tiles_x * width, config.tiles_y * height)

        logger.debug(
            "Background tiled",
            tile=tile.size,
            size=image.size,
            row_height=config.row_height,
        )
        return cls(image=image, row_height=config.row_height)

    @classmethod
    def open(cls, path: Path, config: BackgroundConfig | None = None) -> "Background":
        """Load a texture file and build the background from it.

        Raises:
            ImageLoadError: If the texture cannot be read
        """
        return cls.from_texture(open_image(path), config or BackgroundConfig())
