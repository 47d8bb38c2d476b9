"""Decimal <-> binary-as-decimal conversion.

``encode(5) == 101``: the binary digits of the input, read as a base-10 integer.
``decode`` is the inverse.
"""
from __future__ import annotations

from typing import Optional

from ..exceptions import InvalidArgumentError, NumericOverflowError

_BINARY_BASE = 2
_DECIMAL_BASE = 10


def int_max(bits: int) -> int:
    """Largest value a signed integer of ``bits`` width can hold."""
    if not _is_int(bits) or bits < 2:
        raise InvalidArgumentError("int_bits", "Integer width must be at least 2")
    return 2 ** (bits - 1) - 1


def is_binary_encoded(value: int) -> bool:
    if not _is_int(value) or value < 0:
        return False
    current = value
    while current > 0:
        current, digit = divmod(current, _DECIMAL_BASE)
        if digit > 1:
            return False
    return True


def encode(num: int, *, int_bits: Optional[int] = None) -> int:
    _require_non_negative(num, "num")
    limit = int_max(int_bits) if int_bits is not None else None

    encoded = 0
    position = 0
    current = num
    while current > 0:
        current, digit = divmod(current, _BINARY_BASE)
        place_value = _DECIMAL_BASE ** position
        if limit is not None and place_value > limit:
            raise NumericOverflowError(num, int_bits)
        encoded += digit * place_value
        if limit is not None and encoded > limit:
            raise NumericOverflowError(num, int_bits)
        position += 1

    return encoded


def decode(encoded: int, *, strict: bool = False, int_bits: Optional[int] = None) -> int:
    """Interpret the decimal digits of ``encoded`` as a binary number.

    Without ``strict`` a digit ``d`` above 1 still contributes ``d * 2**position``.
    """
    _require_non_negative(encoded, "encoded")
    if int_bits is not None and encoded > int_max(int_bits):
        raise NumericOverflowError(encoded, int_bits)

    decoded = 0
    position = 0
    current = encoded
    while current > 0:
        current, digit = divmod(current, _DECIMAL_BASE)
        if strict and digit > 1:
            raise InvalidArgumentError(
                "encoded", f"Digit {digit} at position {position} is not binary"
            )
        decoded += digit * _BINARY_BASE ** position
        position += 1

    return decoded


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_non_negative(value, field: str) -> None:
    if not _is_int(value):
        raise InvalidArgumentError(field, "Value must be an integer")
    if value < 0:
        raise InvalidArgumentError(field, "Value must be non-negative")
