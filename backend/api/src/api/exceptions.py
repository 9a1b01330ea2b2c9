"""FastAPI exception handlers for converting DocumentError to HTTP responses.

The ErrorCode-to-HTTP status mapping:
- 400 Bad Request: a required field is missing
- 405 Method Not Allowed: any verb other than POST/OPTIONS, including the
  router's own 405s for verbs without a route
- 500 Internal Server Error: unexpected failure while rendering

Usage:
    from api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

import datetime as dt

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from shared.models import DocumentError, ErrorCode, InternalErrorResponse
from shared.models.errors import ERROR_MESSAGES
from shared.services.formatting import to_iso_timestamp
from shared.utils.logging import get_logger, log_document_event

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.MISSING_FIELD: HTTP_400_BAD_REQUEST,
    ErrorCode.METHOD_NOT_ALLOWED: HTTP_405_METHOD_NOT_ALLOWED,
    ErrorCode.INTERNAL_ERROR: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def document_error_handler(request: Request, exc: DocumentError) -> JSONResponse:
    """Handle DocumentError exceptions and convert to JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The DocumentError exception

    Returns:
        JSONResponse with {"error": ...} and the mapped status code.
    """
    return JSONResponse(
        status_code=get_http_status_for_error(exc.code),
        content=exc.to_error_response().model_dump(mode="json"),
    )


def internal_error_response(exc: Exception) -> JSONResponse:
    """Build the 500 response for an unexpected failure.

    The exception message is returned to the caller together with the
    failure timestamp. Exceptions without a message fall back to the
    INTERNAL_ERROR text.

    Args:
        exc: The uncaught exception

    Returns:
        JSONResponse with 500 status and {"error", "timestamp"} body.
    """
    code = ErrorCode.INTERNAL_ERROR
    message = str(exc) or ERROR_MESSAGES[code]

    log_document_event(
        logger,
        "generate",
        error=message,
        exc=exc,
        code=code.value,
        exception=type(exc).__name__,
    )

    body = InternalErrorResponse(
        error=message,
        timestamp=to_iso_timestamp(dt.datetime.now(dt.UTC)),
    )
    return JSONResponse(
        status_code=get_http_status_for_error(code),
        content=body.model_dump(mode="json"),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Route 405s from the router through the DocumentError body.

    Starlette raises HTTPException(405) for any verb a matched path has no
    route for (TRACE, PROPFIND, ...). Other statuses keep FastAPI's default.
    """
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        return await document_error_handler(
            request, DocumentError(ErrorCode.METHOD_NOT_ALLOWED)
        )
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(DocumentError, document_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
