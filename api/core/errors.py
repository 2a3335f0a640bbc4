"""
Global exception handlers.

Every error leaves the API as `{"error": "<message>"}`:
- HTTPException raised by services keeps its status and detail.
- Request body parse/validation failures become 400 "invalid JSON".
- StoreError becomes 500; the driver message is passed through unless
  `expose_store_errors` is off.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import StoreError

logger = logging.getLogger(__name__)

GENERIC_STORE_MESSAGE = "internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI, *, expose_store_errors: bool = True) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("invalid_request path=%s errors=%s", request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "invalid JSON")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(
            "store_error method=%s path=%s error=%s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        message = str(exc) if expose_store_errors else GENERIC_STORE_MESSAGE
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
