"""Command-line interface for felt.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Convention-based asset paths with per-asset overrides
- Optional border frame
- Verbose/quiet output modes
- Descriptive errors naming the failing asset
"""

from felt.cli.app import cli, main

__all__ = ["cli", "main"]
