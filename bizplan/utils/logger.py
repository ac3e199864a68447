"""Centralized logging configuration.
Call setup_logging() once at application startup.
"""

from __future__ import annotations

import io
import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger."""
    root = logging.getLogger()
    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    level_no = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level_no)

    # Currency symbols must survive consoles without a UTF-8 default encoding
    stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_no)

    formatter = logging.Formatter(
        fmt=(
            "\n%(asctime)s │ %(levelname)-8s │ %(name)s │ %(funcName)s:%(lineno)d\n"
            "  %(message)s"
        ),
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.getLogger("pydantic").setLevel(logging.WARNING)
