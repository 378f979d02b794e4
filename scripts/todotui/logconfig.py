"""Logging setup.

Usage:
    from todotui.logconfig import setup_logging
    setup_logging("DEBUG", Path("todo.log"))

The TUI owns the terminal while it runs. With ``interactive=True`` and no log
file, records are dropped instead of written to stderr.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LEVEL = os.getenv("TODOTUI_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str = DEFAULT_LEVEL,
    log_file: Path | None = None,
    interactive: bool = False,
) -> None:
    resolved = getattr(logging, level.upper(), logging.WARNING)
    if log_file is not None:
        logging.basicConfig(
            level=resolved, format=LOG_FORMAT, filename=str(log_file), encoding="utf-8"
        )
    elif interactive:
        logging.basicConfig(level=resolved, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(level=max(resolved, logging.WARNING), format=LOG_FORMAT)
