from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import BinConvException
from .routers import convert
from .utils.logging import get_logger, setup_logging
from .utils import request_id

setup_logging()

settings = get_settings()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Serving %s %s (strict_decode=%s, int_bits=%s, max_batch_size=%s)",
        settings.app_name,
        settings.api_version,
        settings.strict_decode,
        settings.int_bits,
        settings.max_batch_size,
    )
    yield
    logger.info("Stopped")


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)


def _request_id_of(request: Request) -> str:
    return getattr(request.state, "req_id", None) or request.headers.get(request_id.REQ_ID_HEADER, "unknown")


def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    req_id = _request_id_of(request)
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "requestId": req_id},
        headers={request_id.REQ_ID_HEADER: req_id},
    )


@app.exception_handler(BinConvException)
async def conversion_error_handler(request: Request, exc: BinConvException):
    """Conversion errors are client errors: log at warning, echo the message."""
    logger.warning("[%s] %s rejected: %s", _request_id_of(request), request.url.path, exc.message)
    return _error_response(request, exc.status_code, exc.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("[%s] %s failed", _request_id_of(request), request.url.path)
    return _error_response(request, 500, "Internal server error")


@app.middleware("http")
async def tag_and_time_requests(request: Request, call_next):
    req_id = request.headers.get(request_id.REQ_ID_HEADER) or request_id.generate_req_id()
    request.state.req_id = req_id
    started = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "[%s] %s %s?%s -> %s in %.2fms",
        req_id,
        request.method,
        request.url.path,
        request.url.query,
        response.status_code,
        elapsed_ms,
    )
    response.headers.setdefault(request_id.REQ_ID_HEADER, req_id)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=[request_id.REQ_ID_HEADER],
    allow_credentials="*" not in settings.allowed_origins,
)

app.include_router(convert.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
