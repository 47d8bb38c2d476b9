from __future__ import annotations

from .exceptions import BinConvException, InvalidArgumentError, NumericOverflowError
from .utils.binary import decode, encode

__all__ = [
    "encode",
    "decode",
    "BinConvException",
    "InvalidArgumentError",
    "NumericOverflowError",
]
