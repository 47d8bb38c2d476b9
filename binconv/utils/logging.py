"""Logging for the ``binconv`` logger tree.

The HTTP app logs to stdout. The CLI keeps stdout for results and moves the
same handler to stderr.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ..config import get_settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT_NAME = "binconv"

_handler: Optional[logging.Handler] = None


def setup_logging(stream: Optional[TextIO] = None, debug: Optional[bool] = None) -> logging.Handler:
    """Install one stream handler on the ``binconv`` logger, replacing any earlier one.

    ``debug`` defaults to ``BinConv_Debug``.
    """
    global _handler
    if debug is None:
        debug = get_settings().debug

    package_logger = logging.getLogger(_ROOT_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    package_logger.addHandler(_handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    package_logger.propagate = False

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    return _handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
