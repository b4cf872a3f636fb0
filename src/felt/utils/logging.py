"""Logging utilities for Felt."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render."""

    line_count: int = 0
    glyph_count: int = 0
    inked_count: int = 0
    clipped_count: int = 0
    framed: bool = False
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and optionally a file.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("felt")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_line(self, index: int, glyphs: int, width: int, origin: tuple[int, int]) -> None:
        """Log placement of a line of lettering."""
        self._logger.debug(
            "Line placed",
            line=index,
            glyphs=glyphs,
            width=width,
            left=origin[0],
            top=origin[1],
        )
        self._stats.line_count += 1

    def log_glyph(self, name: str, inked: bool, clipped: bool) -> None:
        """Log compositing of a glyph."""
        self._stats.glyph_count += 1
        if inked:
            self._stats.inked_count += 1
        if clipped:
            self._stats.clipped_count += 1
            self._logger.debug("Glyph outside board", glyph=name)

    def log_framed(self, border_width: int) -> None:
        """Log application of the border."""
        self._logger.debug("Border applied", border_width=border_width)
        self._stats.framed = True

    def log_complete(self) -> None:
        """Log render summary."""
        stats = self._stats
        self._logger.info(
            "Board rendered",
            lines=stats.line_count,
            glyphs=stats.glyph_count,
            inked=stats.inked_count,
            clipped=stats.clipped_count,
            framed=stats.framed,
            duration_ms=round(stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
