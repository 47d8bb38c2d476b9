from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ..dependencies import get_conversion_service
from ..schemas import (
    BatchRequest,
    BatchResponse,
    ConversionResponse,
    DemoRange,
    DemoResponse,
    MetaResponse,
)
from ..services.conversion_service import (
    DEFAULT_DEMO_END,
    DEFAULT_DEMO_START,
    ConversionService,
)
from ..utils import request_id

router = APIRouter(prefix="/api/convert", tags=["convert"])


def _req_id(request: Request) -> str:
    return getattr(request.state, "req_id", None) or request_id.generate_req_id()


@router.get(
    "/encode",
    response_model=ConversionResponse,
    summary="Encode a decimal value",
    description="Returns the binary digits of `value`, read as a decimal integer.",
    responses={
        200: {
            "description": "Converted",
            "content": {
                "application/json": {
                    "example": {"requestId": "ABC123", "data": {"decimal": 5, "binary": 101}}
                }
            },
        },
        400: {"description": "Negative value"},
        422: {"description": "Value is not an integer or overflows the configured width"},
    },
)
async def encode_value(
    request: Request,
    value: int = Query(description="Non-negative decimal value"),
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionResponse:
    return ConversionResponse(requestId=_req_id(request), data=service.encode(value))


@router.get(
    "/decode",
    response_model=ConversionResponse,
    summary="Decode a binary-as-decimal value",
    responses={
        400: {"description": "Negative value or, in strict mode, a non-binary digit"},
        422: {"description": "Value is not an integer or overflows the configured width"},
    },
)
async def decode_value(
    request: Request,
    value: int = Query(description="Binary digits written as a decimal integer"),
    strict: Optional[bool] = Query(default=None, description="Reject digits other than 0 and 1"),
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionResponse:
    return ConversionResponse(requestId=_req_id(request), data=service.decode(value, strict=strict))


@router.post("/encode", response_model=BatchResponse, summary="Encode several values")
async def encode_batch(
    payload: BatchRequest,
    request: Request,
    service: ConversionService = Depends(get_conversion_service),
) -> BatchResponse:
    return BatchResponse(requestId=_req_id(request), data=service.encode_many(payload.values))


@router.get("/demo", response_model=DemoResponse, summary="Encode and round-trip a range of values")
async def demo_table(
    request: Request,
    start: int = Query(default=DEFAULT_DEMO_START, alias="from"),
    end: int = Query(default=DEFAULT_DEMO_END, alias="to"),
    service: ConversionService = Depends(get_conversion_service),
) -> DemoResponse:
    rows = service.demo(start, end)
    return DemoResponse(
        requestId=_req_id(request),
        range=DemoRange(from_=start, to=end),
        data=rows,
    )


@router.get("/meta", response_model=MetaResponse, summary="Version and active limits")
async def get_meta(
    request: Request,
    service: ConversionService = Depends(get_conversion_service),
) -> MetaResponse:
    return MetaResponse(requestId=_req_id(request), data=service.meta())
