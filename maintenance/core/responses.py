"""Envelope rendering and the exception handlers that route every error through it."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from maintenance.schemas.response import JsonResponse

logger = logging.getLogger(__name__)


def send(code: int, content: Any = None, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the single response for a request: body {code, content}, status line = code."""
    envelope = JsonResponse(code=code, content=jsonable_encoder(content, by_alias=True))
    return JSONResponse(
        status_code=code,
        content=envelope.model_dump(),
        headers=headers,
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return send(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request %s %s: %s", request.method, request.url.path, exc.errors())
    return send(status.HTTP_400_BAD_REQUEST, "Invalid request")


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return send(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error")


def register_exception_handlers(app: FastAPI) -> None:
    """Render HTTP errors (including unknown routes), validation errors and anything unhandled as envelopes."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
