from __future__ import annotations

import logging
import sys

import pytest

from binconv.config import get_settings
from binconv.utils import logging as binconv_logging


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in (
        "BinConv_Debug",
        "BinConv_AppVersion",
        "BinConv_StrictDecode",
        "BinConv_IntBits",
        "BinConv_MaxBatchSize",
        "BinConv_AllowedOrigins",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_logging():
    # The CLI points the binconv handler at the per-test captured stderr.
    package_logger = logging.getLogger("binconv")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    installed = binconv_logging._handler
    max_digits = sys.get_int_max_str_digits()
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    binconv_logging._handler = installed
    sys.set_int_max_str_digits(max_digits)
