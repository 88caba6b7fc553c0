"""FastAPI application exposing the detectors over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

try:  # pragma: no cover - optional dependency
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    from pydantic import BaseModel

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment]
    JSONResponse = None  # type: ignore[assignment]
    BaseModel = object  # type: ignore[assignment]
    _FASTAPI_AVAILABLE = False

from ..detectors import (
    DEFAULT_MIN_ALT_TEXT_WORDS,
    UnknownDetectorError,
    default_detector_names,
    detector_names,
)
from ..document import Document
from ..report import ScanOptions, scan_document


class ScanRequest(BaseModel):
    text: str
    source: Optional[str] = None
    detectors: Optional[List[str]] = None
    min_alt_text_words: int = DEFAULT_MIN_ALT_TEXT_WORDS


class HealthResponse(BaseModel):
    status: str


class DetectorsResponse(BaseModel):
    detectors: List[str]


def create_app() -> FastAPI:
    """Create the FastAPI application exposing the scan endpoints."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install fastapi uvicorn`."
        )

    app = FastAPI(title="doyoumarkdown", version="0.1.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/detectors", response_model=DetectorsResponse)
    async def list_detectors() -> DetectorsResponse:
        return DetectorsResponse(detectors=detector_names())

    @app.post("/scan")
    async def scan(payload: ScanRequest) -> Dict[str, Any]:
        options = ScanOptions(
            detectors=payload.detectors if payload.detectors is not None else default_detector_names(),
            min_alt_text_words=payload.min_alt_text_words,
        )
        document = Document(payload.text, source=payload.source)
        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, scan_document, document, options)
        return report.to_dict()

    @app.exception_handler(UnknownDetectorError)
    async def unknown_detector_handler(_: Any, exc: UnknownDetectorError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install fastapi uvicorn`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    uvicorn.run(create_app(), host=host, port=port)
