from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .converter import convert_detailed
from .eras import ERAS
from .errors import WarekiError
from .models import (
    BatchConvertItem,
    BatchConvertRequest,
    BatchConvertResponse,
    ConversionError,
    ConvertRequest,
    ConvertResponse,
    EraInfo,
)
from .settings import settings

LOG_LEVEL = getattr(logging, settings.log_level.upper(), logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("wareki_conv.app")
logger.setLevel(LOG_LEVEL)

ALLOWED_ORIGINS = settings.allowed_origins or ["*"]


app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _uptime_seconds() -> float:
    started_at = getattr(app.state, "started_at", None)
    if not started_at:
        return 0.0
    return max(0.0, (datetime.now(timezone.utc) - started_at).total_seconds())


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id
    start_time = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    if settings.enable_request_logging:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

    return response


@app.exception_handler(WarekiError)
async def wareki_error_handler(request: Request, exc: WarekiError) -> JSONResponse:
    request_id = getattr(request.state, "request_id", str(uuid4()))
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "code": exc.code, "request_id": request_id},
        headers={"X-Request-ID": request_id},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.exception(
        "Unhandled server error",
        extra={"request_id": request_id, "path": request.url.path},
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "サーバー内部で予期しないエラーが発生しました。",
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


@app.on_event("startup")
async def startup() -> None:
    app.state.started_at = datetime.now(timezone.utc)
    app.state.settings = settings


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "uptime_seconds": round(_uptime_seconds(), 3),
        "version": app.version,
    }


@app.get("/api/eras", response_model=List[EraInfo])
async def list_eras() -> List[EraInfo]:
    return [EraInfo.from_era(era) for era in ERAS]


@app.post("/api/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest) -> ConvertResponse:
    conversion = convert_detailed(request.text)
    return ConvertResponse.from_conversion(request.text, conversion)


@app.post("/api/convert/batch", response_model=BatchConvertResponse)
async def convert_batch(request: BatchConvertRequest) -> BatchConvertResponse:
    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"件数が制限を超えています (最大{settings.max_batch_size}件)",
        )

    items: List[BatchConvertItem] = []
    for text in request.texts:
        try:
            conversion = convert_detailed(text)
        except WarekiError as exc:
            items.append(
                BatchConvertItem(input=text, error=ConversionError(code=exc.code, message=exc.message))
            )
            continue
        items.append(BatchConvertItem(input=text, result=ConvertResponse.from_conversion(text, conversion)))

    succeeded = sum(1 for item in items if item.result is not None)
    return BatchConvertResponse(
        items=items,
        total=len(items),
        succeeded=succeeded,
        failed=len(items) - succeeded,
    )
