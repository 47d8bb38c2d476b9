"""Custom exceptions for BinConv."""
from __future__ import annotations


class BinConvException(Exception):
    """Base exception for all BinConv errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidArgumentError(BinConvException):
    """Exception raised when an input value is outside the accepted domain."""

    def __init__(self, field: str, message: str = "Invalid argument"):
        self.field = field
        super().__init__(f"{message}: {field}", status_code=400)


class NumericOverflowError(BinConvException):
    """Exception raised when a value does not fit the emulated host integer."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(
            f"Value {value} does not fit a signed {bits}-bit integer",
            status_code=422,
        )
