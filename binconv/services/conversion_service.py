from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config import Settings
from ..exceptions import InvalidArgumentError
from ..schemas import ConversionOut, DemoRowOut
from ..utils import binary
from ..utils.logging import get_logger

logger = get_logger("conversion")

DEFAULT_DEMO_START = 2
DEFAULT_DEMO_END = 10


class ConversionService:
    def __init__(self, settings: Settings, int_bits: Optional[int] = None):
        self._strict_decode = settings.strict_decode
        self._int_bits = int_bits if int_bits is not None else settings.int_bits
        self._max_batch_size = settings.max_batch_size
        self._version = settings.api_version

    @property
    def int_bits(self) -> Optional[int]:
        return self._int_bits

    def encode(self, value: int) -> ConversionOut:
        encoded = binary.encode(value, int_bits=self._int_bits)
        logger.debug("encode %s -> %s", value, encoded)
        return ConversionOut(decimal=value, binary=encoded)

    def decode(self, value: int, strict: Optional[bool] = None) -> ConversionOut:
        use_strict = self._strict_decode if strict is None else strict
        if not use_strict and not binary.is_binary_encoded(value):
            logger.warning("decode %s: digits above 1 are weighted as d * 2**position", value)
        decoded = binary.decode(value, strict=use_strict, int_bits=self._int_bits)
        logger.debug("decode %s -> %s (strict=%s)", value, decoded, use_strict)
        return ConversionOut(decimal=decoded, binary=value)

    def encode_many(self, values: Sequence[int]) -> List[ConversionOut]:
        if len(values) > self._max_batch_size:
            raise InvalidArgumentError(
                "values", f"At most {self._max_batch_size} values are accepted"
            )
        return [self.encode(value) for value in values]

    def demo(self, start: int = DEFAULT_DEMO_START, end: int = DEFAULT_DEMO_END) -> List[DemoRowOut]:
        """Encode every value in ``[start, end]`` and decode it back."""

        if start < 0 or end < 0:
            raise InvalidArgumentError("range", "Bounds must be non-negative")
        if start > end:
            raise InvalidArgumentError("range", "Start is greater than end")
        if end - start + 1 > self._max_batch_size:
            raise InvalidArgumentError(
                "range", f"At most {self._max_batch_size} values are accepted"
            )

        rows: List[DemoRowOut] = []
        for value in range(start, end + 1):
            encoded = binary.encode(value, int_bits=self._int_bits)
            round_trip = binary.decode(encoded, strict=True, int_bits=self._int_bits)
            rows.append(DemoRowOut(decimal=value, binary=encoded, roundTrip=round_trip))
        return rows

    def meta(self) -> Dict[str, object]:
        return {
            "version": self._version,
            "strictDecode": self._strict_decode,
            "intBits": self._int_bits,
            "maxBatchSize": self._max_batch_size,
        }
