"""Shared logging configuration for the VAWA screener.

Call ``configure_logging()`` once at an entry point (API startup, the
self-test runner). It does nothing if the root logger already has handlers.
"""

import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a console handler (idempotent)."""
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
