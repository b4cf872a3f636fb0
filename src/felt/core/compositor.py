"""Alpha compositing of ink onto the board.

The board is always opaque; ink carries the alpha. Each channel blends as

    bg' = bg * (1 - a/255) + fg * (a/255)

in single precision and is truncated back to an 8 bit value, leaving the
board's alpha untouched. The canvas is written back after every glyph, so
overlapping glyphs blend in the order they are composited.
"""

import numpy as np

from felt.domain.color import Color

Pixel = tuple[int, int, int, int]


def blend(background: np.ndarray, foreground: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    """Blend RGB foreground over RGB background.

    Args:
        background: uint8 array of shape (..., 3)
        foreground: uint8 array broadcastable to the background
        alpha: uint8 foreground alpha of shape (...)

    Returns:
        Blended uint8 array shaped like the background
    """
    percent_fg = alpha.astype(np.float32)[..., np.newaxis] / np.float32(255.0)
    percent_bg = np.float32(1.0) - percent_fg
    blended = (
        background.astype(np.float32) * percent_bg
        + np.asarray(foreground, dtype=np.float32) * percent_fg
    )
    return blended.astype(np.uint8)


def overlay(bg: Pixel, fg: Pixel) -> Pixel:
    """Overlay one translucent pixel on an opaque one.

    Args:
        bg: Opaque background pixel (r, g, b, a)
        fg: Foreground pixel whose alpha weights the blend

    Returns:
        Blended pixel keeping the background's alpha
    """
    blended = blend(
        np.array(bg[:3], dtype=np.uint8),
        np.array(fg[:3], dtype=np.uint8),
        np.array(fg[3], dtype=np.uint8),
    )
    r, g, b = (int(channel) for channel in blended)
    return (r, g, b, bg[3])


def overlay_coverage(
    canvas: np.ndarray,
    color: Color,
    coverage: np.ndarray,
    left: int,
    top: int,
) -> bool:
    """Composite one glyph's coverage onto the canvas in place.

    Coverage pixels falling outside the canvas are dropped.

    Args:
        canvas: RGBA uint8 array of shape (height, width, 4)
        color: Ink of the glyph
        coverage: Float array of shape (h, w) with values in [0, 1]
        left: Canvas column of coverage[:, 0]
        top: Canvas row of coverage[0, :]

    Returns:
        True if any part of the glyph landed on the canvas
    """
    canvas_height, canvas_width = canvas.shape[:2]
    height, width = coverage.shape

    x0, y0 = max(left, 0), max(top, 0)
    x1, y1 = min(left + width, canvas_width), min(top + height, canvas_height)
    if x0 >= x1 or y0 >= y1:
        return False

    alpha = Color.alpha(coverage[y0 - top : y1 - top, x0 - left : x1 - left])
    ink = np.array(color.rgb, dtype=np.uint8)
    canvas[y0:y1, x0:x1, :3] = blend(canvas[y0:y1, x0:x1, :3], ink, alpha)
    return True
