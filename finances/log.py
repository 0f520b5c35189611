"""Rich logging setup."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str | int = "WARNING") -> None:
    """Configure the root logger with a Rich handler.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level.
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
    else:
        numeric_level = level
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
        force=True,
    )
