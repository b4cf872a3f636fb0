"""Raster image loading and saving.

Images are handled as RGBA Pillow images throughout felt. Decode and encode
failures surface as ImageLoadError / ImageSaveError naming the file.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from felt.exceptions import ImageLoadError, ImageSaveError


def open_image(path: Path) -> Image.Image:
    """Load an image file as RGBA.

    Args:
        path: Path to a PNG, JPEG or other Pillow-readable image

    Returns:
        Fully decoded RGBA image

    Raises:
        ImageLoadError: If the file is missing, unreadable or not an image
    """
    if not path.exists():
        raise ImageLoadError(str(path), "file not found")

    try:
        with Image.open(path) as image:
            image.load()
            return image.convert("RGBA")
    except UnidentifiedImageError as e:
        raise ImageLoadError(str(path), "unrecognized image format") from e
    except (OSError, ValueError) as e:
        raise ImageLoadError(str(path), str(e)) from e


def save_image(image: Image.Image, path: Path) -> None:
    """Save an image, leaving no partial file behind on failure.

    Args:
        image: Image to encode
        path: Destination; the format follows the file extension

    Raises:
        ImageSaveError: If the image cannot be encoded or written
    """
    existed = path.exists()
    try:
        image.save(path)
    except (OSError, ValueError, KeyError) as e:
        if not existed and path.is_file():
            path.unlink()
        raise ImageSaveError(str(path), str(e) or type(e).__name__) from e
