"""CLI application entry point for felt.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from felt import __version__
from felt.cli.output import (
    console,
    print_asset,
    print_board_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from felt.config import AssetConfig, FeltSettings, LoggingConfig
from felt.core import Board
from felt.exceptions import FeltError, ResourceError
from felt.io import save_image
from felt.utils import configure_logging

DEFAULT_BORDER = Path("oak.jpg")

# Create the Typer app
app = typer.Typer(
    name="felt",
    help="Render a phrase as felt letter board lettering.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Felt[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    phrase: Annotated[
        str,
        typer.Argument(
            help="Phrase to write on the board",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output image path",
        ),
    ] = Path("output.png"),
    background: Annotated[
        Path,
        typer.Option(
            "--background",
            "-b",
            help="Felt background texture",
        ),
    ] = Path("gray.jpg"),
    border: Annotated[
        Path | None,
        typer.Option(
            "--border",
            help="Border texture (default: oak.jpg when present)",
            show_default=False,
        ),
    ] = None,
    no_border: Annotated[
        bool,
        typer.Option(
            "--no-border",
            help="Render without a frame",
        ),
    ] = False,
    font: Annotated[
        Path,
        typer.Option(
            "--font",
            "-f",
            help="Font for the letters",
        ),
    ] = Path("font.ttf"),
    shade: Annotated[
        Path,
        typer.Option(
            "--shade",
            "-s",
            help="Font for the letter shading",
        ),
    ] = Path("shade.ttf"),
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Write a phrase on a felt letter board and save it as an image.

    Assets are read from the working directory by default: gray.jpg for the
    felt, oak.jpg for the frame (optional), font.ttf for the letters and
    shade.ttf for their shading.

    Example:
        felt "hello, world!"

    This will create output.png with the phrase centred on the board.
    """
    if border is not None and no_border:
        print_error("Cannot use --border and --no-border together")
        raise typer.Exit(code=1)

    if no_border:
        border_path = None
    elif border is not None:
        border_path = border
    else:
        border_path = DEFAULT_BORDER if DEFAULT_BORDER.is_file() else None

    settings = FeltSettings(
        assets=AssetConfig(
            background=background,
            border=border_path,
            font=font,
            shade=shade,
            output=output,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading assets")

        board = Board.from_settings(settings)

        if not quiet:
            assets = settings.assets
            print_asset("background", str(assets.background))
            if assets.border is not None:
                print_asset("border", str(assets.border))
            print_asset("font", str(assets.font))
            print_asset("shade", str(assets.shade))
            width, height = board.background.size
            print_board_info(
                width, height, board.background.row_height, assets.border is not None
            )
            print_step("Rendering")

        start_time = time.time()
        lettered = board.write_phrase(phrase)
        image = lettered.render()
        save_image(image, settings.assets.output)
        total_time = time.time() - start_time

        if not quiet:
            print_success(
                output_path=str(settings.assets.output),
                file_size=_format_file_size(settings.assets.output),
                total_time_s=total_time,
                lines=lettered.height,
                letters=len(phrase) - phrase.count("\n"),
                size=image.size,
            )

    except ResourceError as e:
        print_error(e.reason, details=f"Asset: {e.path}")
        raise typer.Exit(code=1)
    except FeltError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
