from __future__ import annotations

from .convert import (
    BatchRequest,
    BatchResponse,
    ConversionOut,
    ConversionResponse,
    DemoRange,
    DemoResponse,
    DemoRowOut,
    MetaResponse,
)

__all__ = [
    "ConversionOut",
    "ConversionResponse",
    "BatchRequest",
    "BatchResponse",
    "DemoRowOut",
    "DemoRange",
    "DemoResponse",
    "MetaResponse",
]
