"""Tests for background tiling."""

import numpy as np
import pytest
from PIL import Image

from felt.config import BackgroundConfig
from felt.core.tiler import Background, mirrored_columns, tile_mirrored
from felt.exceptions import ImageLoadError


def striped_tile(width: int, height: int) -> Image.Image:
    """Tile whose pixel (x, y) is (x, y, 0, 255)."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = np.arange(width)[np.newaxis, :]
    pixels[..., 1] = np.arange(height)[:, np.newaxis]
    pixels[..., 3] = 255
    return Image.fromarray(pixels)


class TestMirroredColumns:
    """Tests for the horizontal reflection index."""

    def test_columns(self):
        """Test columns run forward then back, repeating the edge column."""
        assert mirrored_columns(3, 12).tolist() == [0, 1, 2, 2, 1, 0, 1, 2, 2, 1, 0, 1]

    def test_single_column_tile(self):
        """Test a one pixel wide tile repeats."""
        assert mirrored_columns(1, 4).tolist() == [0, 0, 0, 0]

    @pytest.mark.parametrize("tile_width", [2, 3, 5, 8])
    def test_mirror_property(self, tile_width):
        """Test column x equals column 2W - 1 - x within a period."""
        columns = mirrored_columns(tile_width, 4 * tile_width)
        for x in range(2 * tile_width - 1):
            assert columns[x] == columns[2 * tile_width - 1 - x]


class TestTileMirrored:
    """Tests for tile_mirrored."""

    def test_output_size(self):
        """Test the requested size is produced."""
        tiled = tile_mirrored(striped_tile(3, 2), 10, 7)
        assert tiled.size == (10, 7)
        assert tiled.mode == "RGBA"

    def test_samples(self):
        """Test each output pixel samples the reflected column and repeated row."""
        tiled = np.asarray(tile_mirrored(striped_tile(3, 2), 10, 5))

        assert tiled[0, :, 0].tolist() == [0, 1, 2, 2, 1, 0, 1, 2, 2, 1]
        assert tiled[:, 0, 1].tolist() == [0, 1, 0, 1, 0]

    def test_source_is_top_left_corner(self):
        """Test the first tile is the source itself."""
        source = striped_tile(4, 3)
        tiled = tile_mirrored(source, 9, 9)
        assert np.array_equal(np.asarray(tiled)[:3, :4], np.asarray(source))

    def test_solid_tile(self):
        """Test a single pixel tile fills the output."""
        tiled = tile_mirrored(Image.new("RGBA", (1, 1), (50, 60, 70, 255)), 5, 4)
        assert (np.asarray(tiled) == (50, 60, 70, 255)).all()


class TestBackground:
    """Tests for Background."""

    def test_from_texture(self):
        """Test downsampling and 2x2 tiling."""
        texture = Image.new("RGB", (8, 6), (90, 90, 90))
        background = Background.from_texture(texture, BackgroundConfig())

        assert background.size == (8, 6)
        assert background.image.mode == "RGBA"
        assert background.row_height == pytest.approx(19.8)
        assert (np.asarray(background.image) == (90, 90, 90, 255)).all()

    def test_tiling_configuration(self):
        """Test tile counts and downsampling factor are honoured."""
        texture = Image.new("RGBA", (9, 9), (1, 1, 1, 255))
        config = BackgroundConfig(source_row_height=30.0, downsample=3, tiles_x=4, tiles_y=1)
        background = Background.from_texture(texture, config)

        assert background.size == (12, 3)
        assert background.row_height == pytest.approx(10.0)

    def test_open(self, tmp_path):
        """Test loading a texture file."""
        path = tmp_path / "gray.png"
        Image.new("RGB", (4, 4), (128, 128, 128)).save(path)

        background = Background.open(path)
        assert background.size == (4, 4)

    def test_open_missing(self, tmp_path):
        """Test missing textures raise ImageLoadError."""
        with pytest.raises(ImageLoadError):
            Background.open(tmp_path / "gray.jpg")
