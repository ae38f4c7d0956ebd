"""Logging configuration.

stdout carries the verdict lines, so every log record goes to stderr through
a Rich handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "dotquad-rich"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a single stderr `RichHandler` to the root logger."""

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    root.addHandler(handler)
