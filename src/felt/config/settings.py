"""Configuration settings for Felt."""

from pathlib import Path

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Configuration for laying out lettering on the board.

    Both values are expressed in background rows, so lettering keeps its
    proportions to the felt grooves whatever the texture resolution.
    """

    glyph_scale: float = Field(
        default=5.8,
        gt=0.0,
        description="Glyph pixel size as a multiple of the row height",
    )
    rows_per_line: int = Field(
        default=5,
        ge=1,
        description="Number of background rows occupied by one line of lettering",
    )

    def glyph_size(self, row_height: float) -> float:
        """Get the glyph pixel size for a background row height."""
        return row_height * self.glyph_scale

    def line_height(self, row_height: float) -> float:
        """Get the height of one line of lettering in pixels."""
        return row_height * self.rows_per_line


class BackgroundConfig(BaseModel):
    """Configuration for building the tiled background."""

    source_row_height: float = Field(
        default=39.6,
        gt=0.0,
        description="Row spacing of the felt texture at its native resolution",
    )
    downsample: int = Field(
        default=2,
        ge=1,
        description="Factor by which the texture is shrunk before tiling",
    )
    tiles_x: int = Field(
        default=2,
        ge=1,
        description="Board width in (downsampled) texture widths",
    )
    tiles_y: int = Field(
        default=2,
        ge=1,
        description="Board height in (downsampled) texture heights",
    )

    @property
    def row_height(self) -> float:
        """Row height of the downsampled texture."""
        return self.source_row_height / self.downsample


class AssetConfig(BaseModel):
    """Locations of the input assets and the rendered output."""

    background: Path = Field(
        default=Path("gray.jpg"),
        description="Felt background texture",
    )
    border: Path | None = Field(
        default=Path("oak.jpg"),
        description="Border texture (None = no frame)",
    )
    font: Path = Field(
        default=Path("font.ttf"),
        description="Font for the letters",
    )
    shade: Path = Field(
        default=Path("shade.ttf"),
        description="Font drawing the shading of each letter",
    )
    output: Path = Field(
        default=Path("output.png"),
        description="Rendered image path",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FeltSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    background: BackgroundConfig = Field(default_factory=BackgroundConfig)
    assets: AssetConfig = Field(default_factory=AssetConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FeltSettings:
    """Get default application settings."""
    return FeltSettings()
