"""Board configuration and rendering.

A Board bundles everything needed to draw: the tiled background, an
optional border and the two fonts. Writing a phrase on it lays out a fresh
Lettering and returns a LetteredBoard, which renders the phrase centred on
the background:

    board = Board(background, border, font, shade)
    image = board.write_phrase("hello, world!").render()

Lines are stacked around the vertical centre of the board, each occupying
rows_per_line background rows, and every line is centred horizontally on
its own width.
"""

import time
from dataclasses import dataclass, field

import numpy as np
import structlog
from PIL import Image

from felt.config import FeltSettings, LayoutConfig
from felt.core.border import Border
from felt.core.compositor import overlay_coverage
from felt.core.lettering import Lettering
from felt.core.tiler import Background
from felt.io.font import FontResource
from felt.utils import RenderLogger

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Board:
    """Configuration for rendering lettered boards.

    Holds the background, optional border and the fonts drawing the letters
    and their shading. A board is never modified, so any number of phrases
    can be written on it independently.

    Attributes:
        background: Tiled felt background
        border: Frame texture, None for an unframed board
        font: Font for the letter faces; all layout metrics come from it
        shade: Font drawing each letter's shading
        layout: Glyph size and line spacing
    """

    background: Background
    border: Border | None
    font: FontResource
    shade: FontResource
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    @classmethod
    def from_settings(cls, settings: FeltSettings) -> "Board":
        """Load every asset named in the settings.

        Raises:
            ImageLoadError: If the background or border cannot be read
            FontLoadError: If either font cannot be read
        """
        assets = settings.assets
        background = Background.open(assets.background, settings.background)
        border = Border.open(assets.border) if assets.border is not None else None
        font = FontResource.open(assets.font)
        shade = FontResource.open(assets.shade)

        logger.info(
            "Board loaded",
            background=str(assets.background),
            border=str(assets.border) if assets.border else None,
            font=str(assets.font),
            shade=str(assets.shade),
            size=background.size,
        )
        return cls(background, border, font, shade, layout=settings.layout)

    @property
    def fonts(self) -> tuple[FontResource, FontResource]:
        """Font registry indexed by FontRole."""
        return (self.font, self.shade)

    @property
    def glyph_size(self) -> float:
        return self.layout.glyph_size(self.background.row_height)

    @property
    def line_height(self) -> float:
        return self.layout.line_height(self.background.row_height)

    def write_phrase(self, phrase: str) -> "LetteredBoard":
        """Lay out a phrase on this board.

        Args:
            phrase: Text to write; newlines start new lines

        Returns:
            Board and lettering, ready to render
        """
        lettering = Lettering(self.fonts, self.glyph_size)
        lettering.write(phrase)
        return LetteredBoard(self, lettering)


class LetteredBoard:
    """A board with a phrase laid out on it.

    The lettering's lines are captured when the board is written on, so
    later changes to the Lettering object never alter what render() draws.
    """

    def __init__(self, board: Board, lettering: Lettering) -> None:
        self._board = board
        self._lettering = lettering
        self._lines = tuple((line.glyphs, line.width) for line in lettering.lines)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def lettering(self) -> Lettering:
        return self._lettering

    @property
    def height(self) -> int:
        """Number of lines captured for rendering."""
        return len(self._lines)

    def line_origin(self, index: int, size: tuple[int, int]) -> tuple[int, int]:
        """Canvas position of a line's glyph origin.

        Args:
            index: Line number, 0 for the first line
            size: (width, height) of the canvas

        Returns:
            (left, baseline) in canvas pixels
        """
        width, height = size
        line_height = self._board.line_height
        block_height = line_height * self.height
        line_width = self._lines[index][1]

        top = int(height / 2 - block_height / 2 + (index + 1) * line_height)
        left = int(width / 2 - line_width / 2)
        return left, top

    def render(self) -> Image.Image:
        """Draw the lettering onto a copy of the background.

        Glyphs are composited line by line in layout order. Parts falling
        off the board are dropped. The border, if any, is added last.

        Returns:
            New RGBA image
        """
        render_logger = RenderLogger(logger)
        render_logger.stats.start_time = time.time()

        canvas = np.array(self._board.background.image)
        size = (canvas.shape[1], canvas.shape[0])
        fonts = self._board.fonts

        for index, (glyphs, width) in enumerate(self._lines):
            left, top = self.line_origin(index, size)
            render_logger.log_line(index, len(glyphs), width, (left, top))

            for glyph in glyphs:
                coverage = fonts[glyph.font].coverage(glyph.name, glyph.size, glyph.position)
                if coverage is None or glyph.box is None:
                    render_logger.log_glyph(glyph.name, inked=False, clipped=False)
                    continue

                landed = overlay_coverage(
                    canvas,
                    glyph.color,
                    coverage,
                    left + glyph.box.left,
                    top + glyph.box.top,
                )
                render_logger.log_glyph(glyph.name, inked=True, clipped=not landed)

        image = Image.fromarray(canvas)
        border = self._board.border
        if border is not None:
            image = border.apply(image)
            render_logger.log_framed(border.width)

        render_logger.stats.end_time = time.time()
        render_logger.log_complete()
        return image
