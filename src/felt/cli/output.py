"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, asset and result messages.
"""


from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Felt[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_asset(role: str, path: str) -> None:
    """Print a loaded asset."""
    # Use Text to safely handle paths with special characters
    line = Text(f"  {role:<11}")
    line.append(path)
    console.print(line)


def print_board_info(width: int, height: int, row_height: float, framed: bool) -> None:
    """Print board dimensions.

    Args:
        width: Board width in pixels (before framing)
        height: Board height in pixels (before framing)
        row_height: Felt row height in pixels
        framed: Whether a border will be added
    """
    frame = "framed" if framed else "no border"
    console.print(
        f"  {width}×{height} px {SYM_DOT} {row_height:g} px rows {SYM_DOT} {frame}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    lines: int,
    letters: int,
    size: tuple[int, int],
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total render time in seconds
        lines: Number of lines of lettering
        letters: Number of letters laid out
        size: (width, height) of the saved image
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    line_word = "line" if lines == 1 else "lines"
    console.print(
        f"  {size[0]}×{size[1]} px {SYM_DOT} {lines} {line_word} {SYM_DOT} {letters} letters"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
