"""Logging configuration for the springgen command line.

Library modules only create module loggers; the CLI installs a single
rich handler on the root logger so diagnostics share the console with the
rest of the output.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from springgen.utils import console


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Route all log records through a ``RichHandler`` at *level*."""
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )
