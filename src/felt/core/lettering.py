"""Lettering layout.

Turns a stream of characters into lines of positioned glyphs. Each letter
places two glyphs on the same anchor: the letter face from the main font in
white, then its shading from the shadow font in light grey. The shading's
look lives entirely in the shadow font's outlines.

The pen only ever moves by the main font's metrics: its advance width plus
the kerning against the previous letter on the line.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace

from felt.domain import Color, FontRole, GlyphInstance
from felt.io.font import FontResource


@dataclass(frozen=True)
class Cursor:
    """Pen state of a line.

    Attributes:
        x: Pen x position
        y: Baseline y position
        last: Name of the previous main font glyph, None at line start
    """

    x: float = 0.0
    y: float = 0.0
    last: str | None = None

    def advanced(self, distance: float, glyph: str) -> "Cursor":
        """Cursor moved right by distance after placing glyph."""
        return replace(self, x=self.x + distance, last=glyph)


class Line:
    """A line of lettering.

    Glyphs are kept in insertion order, which is also the order they are
    composited in.
    """

    def __init__(self) -> None:
        self._glyphs: list[GlyphInstance] = []
        self._cursor = Cursor()

    @property
    def glyphs(self) -> tuple[GlyphInstance, ...]:
        return tuple(self._glyphs)

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def __len__(self) -> int:
        return len(self._glyphs)

    def __iter__(self) -> Iterator[GlyphInstance]:
        return iter(self._glyphs)

    @property
    def width(self) -> int:
        """Rightmost pixel extent of the line's glyphs, 0 if nothing is inked."""
        width = 0
        for glyph in self._glyphs:
            if glyph.box is not None and glyph.box.right > width:
                width = glyph.box.right
        return width

    def _place(self, font: FontResource, role: FontRole, name: str, size: float, color: Color) -> None:
        position = (self._cursor.x, self._cursor.y)
        self._glyphs.append(
            GlyphInstance(
                font=role,
                name=name,
                x=position[0],
                y=position[1],
                size=size,
                color=color,
                box=font.pixel_box(name, size, position),
            )
        )

    def append_letter(self, letter: str, fonts: Sequence[FontResource], size: float) -> None:
        """Place a letter at the pen and advance the pen past it.

        Args:
            letter: Character to place
            fonts: Font registry indexed by FontRole
            size: Glyph pixel size
        """
        main = fonts[FontRole.MAIN]
        shadow = fonts[FontRole.SHADOW]
        name = main.glyph_name(letter)

        self._place(main, FontRole.MAIN, name, size, Color.WHITE)
        self._place(shadow, FontRole.SHADOW, shadow.glyph_name(letter), size, Color.LIGHT_GREY)

        distance = main.advance_width(name, size)
        if self._cursor.last is not None:
            distance += main.kerning(self._cursor.last, name, size)
        self._cursor = self._cursor.advanced(distance, name)


class Lettering:
    """Lines of laid out lettering.

    Always holds at least one (possibly empty) line.

    Example:
        lettering = Lettering((font, shade), size=114.84)
        lettering.write("hello\\nworld")
        lettering.height  # -> 2
    """

    def __init__(self, fonts: Sequence[FontResource], size: float) -> None:
        """Initialize empty lettering.

        Args:
            fonts: Font registry indexed by FontRole (main, shadow)
            size: Glyph pixel size
        """
        self._fonts = tuple(fonts)
        self.size = size
        self._lines = [Line()]

    @property
    def height(self) -> int:
        """The height of this lettering in number of lines."""
        return len(self._lines)

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def glyph_count(self) -> int:
        return sum(len(line) for line in self._lines)

    def put_character(self, char: str) -> None:
        """Add a character: a newline starts a new line, anything else is a letter."""
        if char == "\n":
            self._lines.append(Line())
        else:
            self._lines[-1].append_letter(char, self._fonts, self.size)

    def write(self, text: str) -> None:
        """Add every character of text."""
        for char in text:
            self.put_character(char)
