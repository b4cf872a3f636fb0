"""Ink colors for lettering.

Letters are drawn with two inks: the letter face and its shading. Coverage
values produced by glyph rasterization become the alpha channel, so
anti-aliased edges blend into the felt without changing the ink's hue.
"""

from enum import Enum

import numpy as np


class Color(Enum):
    """Ink color of a glyph, valued by its grey level."""

    WHITE = 245
    LIGHT_GREY = 180

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Opaque RGB triple of the ink."""
        return (self.value, self.value, self.value)

    def rgba(self, coverage: float) -> tuple[int, int, int, int]:
        """Convert a coverage value into a translucent pixel of this ink.

        Args:
            coverage: Anti-aliasing weight in [0, 1]; values outside are clamped

        Returns:
            (r, g, b, a) with a = round(255 * coverage)
        """
        coverage = min(max(coverage, 0.0), 1.0)
        return (*self.rgb, round(255 * coverage))

    @staticmethod
    def alpha(coverage: np.ndarray) -> np.ndarray:
        """Vectorized alpha channel for a coverage array.

        Args:
            coverage: Array of coverage values in [0, 1]

        Returns:
            uint8 array of the same shape
        """
        return np.rint(np.clip(coverage, 0.0, 1.0) * 255).astype(np.uint8)
