"""Logger setup for commentscan.

Everything logs under the ``commentscan`` base logger, which writes plain
``LEVEL: message`` records to stderr so that stdout stays reserved for the
report itself.
"""

import logging
import sys
from typing import TextIO

BASE_LOGGER = "commentscan"


def setup_logger(level: int = logging.WARNING, stream: TextIO | None = None) -> logging.Logger:
    """Configure the base logger once and return it.

    Args:
        level: Logging level for the base logger
        stream: Optional stream (stderr by default)

    Returns:
        The configured base logger
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under ``commentscan``."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
