"""
logger.py

Responsibility: Configures Python's standard logging for command-line use.
Does NOT: decide what gets logged; modules use logging.getLogger(__name__).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "public-ip"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attaches a stdout handler to the root logger and sets its level.

    Calling this more than once only updates the level; the handler is
    installed a single time.

    Args:
        level: A logging level name such as "DEBUG", or a numeric level.

    Returns:
        The configured root logger.
    """
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    return root
