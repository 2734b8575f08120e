"""FastAPI application exposing the conversion engine over HTTP.

WHY: External clients (integration platforms, curl, other services) need
an HTTP API to convert EDI documents between string, JSON, and XML
without embedding the Python package. FastAPI provides request
validation through the pydantic models and automatic OpenAPI docs.

HOW: A single FastAPI app exposes the generic ``/api/convert`` endpoint,
one direct endpoint per target format, a health check, and a root index.
Each conversion endpoint turns its validated body into a core Document,
calls the orchestrator, and wraps the result in ConversionResponse.

RULES:
- All responses use the {success, data, error} envelope
- Request validation failures → 400 "Validation failed: <field>: <msg>, ..."
- Unknown routes → 404 "Endpoint not found"; other HTTP errors keep their
  status and detail
- Conversion errors (ConversionError) → 400 with the error message
- Unexpected exceptions → 500 "Internal server error", logged with traceback
- Every request is logged at INFO level (method and path)
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from edi_converter.config import ALLOWED_ORIGINS, API_HOST, API_PORT, API_VERSION
from edi_converter.core.converter import (
    convert,
    convert_to_json,
    convert_to_string,
    convert_to_xml,
)
from edi_converter.core.errors import ConversionError
from edi_converter.core.model import Document
from edi_converter.server.models import (
    ConversionRequest,
    ConversionResponse,
    DocumentRequest,
    HealthResponse,
    StringConversionRequest,
)

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ConversionResponse, "description": "Validation or conversion error"},
    500: {"model": ConversionResponse, "description": "Internal server error"},
}

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="EDI Document Converter API",
    description=(
        "REST API to convert EDI X12-style documents between delimited "
        "string, grouped JSON, and XML formats."
    ),
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Flatten pydantic error dicts into "field.path: message" strings.

    RULES:
    - The leading "body" location is dropped
    - Messages raised by model validators are shown without pydantic's
      "Value error, " prefix
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error.get("msg", "")
        messages.append("{}: {}".format(".".join(loc), message) if loc else message)
    return messages


def _failure(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = ConversionResponse(success=False, error=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _failure(
        400, "Validation failed: {}".format(", ".join(format_validation_errors(exc.errors())))
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _failure(404, "Endpoint not found")
    return _failure(exc.status_code, str(exc.detail), headers=exc.headers)


@app.exception_handler(ConversionError)
async def conversion_exception_handler(request: Request, exc: ConversionError) -> JSONResponse:
    logger.info("Conversion rejected for %s: %s", request.url.path, exc)
    return _failure(400, str(exc))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return _failure(500, "Internal server error")


def _success(document: Document) -> ConversionResponse:
    return ConversionResponse(success=True, data=document.to_dict())


# ---------------------------------------------------------------------------
# Endpoints: Conversion
# ---------------------------------------------------------------------------


@app.post(
    "/api/convert",
    response_model=ConversionResponse,
    response_model_exclude_none=True,
    tags=["conversion"],
    summary="Convert a document to another format",
    description=(
        "Convert a document between string, JSON, and XML. The target format "
        "must differ from the source; separators are required for string output."
    ),
    responses=_ERROR_RESPONSES,
)
async def convert_document(body: ConversionRequest) -> ConversionResponse:
    result = convert(
        body.document.to_document(),
        body.target_format,
        segment_separator=body.segment_separator,
        element_separator=body.element_separator,
    )
    return _success(result)


@app.post(
    "/api/convert/string",
    response_model=ConversionResponse,
    response_model_exclude_none=True,
    tags=["conversion"],
    summary="Convert a document to delimited string format",
    description=(
        "Convert any document to EDI-style delimited text. A string source "
        "is re-delimited with the given separators."
    ),
    responses=_ERROR_RESPONSES,
)
async def convert_document_to_string(body: StringConversionRequest) -> ConversionResponse:
    result = convert_to_string(
        body.document.to_document(),
        body.segment_separator,
        body.element_separator,
    )
    return _success(result)


@app.post(
    "/api/convert/json",
    response_model=ConversionResponse,
    response_model_exclude_none=True,
    tags=["conversion"],
    summary="Convert a document to grouped JSON",
    responses=_ERROR_RESPONSES,
)
async def convert_document_to_json(body: DocumentRequest) -> ConversionResponse:
    return _success(convert_to_json(body.document.to_document()))


@app.post(
    "/api/convert/xml",
    response_model=ConversionResponse,
    response_model_exclude_none=True,
    tags=["conversion"],
    summary="Convert a document to XML",
    responses=_ERROR_RESPONSES,
)
async def convert_document_to_xml(body: DocumentRequest) -> ConversionResponse:
    return _success(convert_to_xml(body.document.to_document()))


# ---------------------------------------------------------------------------
# Endpoints: Health and index
# ---------------------------------------------------------------------------


@app.get(
    "/api/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        success=True,
        message="Document Converter API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@app.get("/", tags=["health"], summary="Service index")
async def index() -> Dict[str, Any]:
    return {
        "message": "Document Converter API",
        "version": API_VERSION,
        "description": "API to convert documents between String, JSON, and XML formats",
        "documentation": {
            "swagger": "GET /docs",
            "openapi": "GET /openapi.json",
        },
        "endpoints": {
            "health": "GET /api/health",
            "convert": "POST /api/convert",
            "convertToString": "POST /api/convert/string",
            "convertToJson": "POST /api/convert/json",
            "convertToXml": "POST /api/convert/xml",
        },
    }


def run_api():
    """Entry point for the edi-converter-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
