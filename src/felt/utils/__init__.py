"""Utility functions for felt.

This module provides logging setup and render statistics.
"""

from felt.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
