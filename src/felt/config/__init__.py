"""Configuration management for felt.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Glyph size and line spacing
- BackgroundConfig: Texture downsampling and tiling
- AssetConfig: Input asset and output paths
- LoggingConfig: Logging settings
- FeltSettings: Main application settings
"""

from felt.config.settings import (
    AssetConfig,
    BackgroundConfig,
    FeltSettings,
    LayoutConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "AssetConfig",
    "BackgroundConfig",
    "FeltSettings",
    "LayoutConfig",
    "LoggingConfig",
    "get_default_settings",
]
