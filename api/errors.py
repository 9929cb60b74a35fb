"""
API Error Handling

Standardized error handling for the fixture API. Error payloads carry the
request method next to the error, like every other response.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models.responses import ErrorDetail, MethodErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self, method: str) -> MethodErrorResponse:
        return MethodErrorResponse(
            method=method,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
            ),
        )


class InvalidRequestError(APIError):
    """Invalid request body or parameters."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code="INVALID_REQUEST",
            message=message,
            status_code=400,
            details=details,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message} {exc.details or ''}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response(request.method).model_dump(exclude_none=True),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=MethodErrorResponse(
            method=request.method,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
            ),
        ).model_dump(exclude_none=True),
    )


def undefined_method_response(method: str) -> MethodErrorResponse:
    """Payload for any method the comment endpoint does not define."""
    return MethodErrorResponse(
        method=method,
        error=ErrorDetail(message="Request method is undefined"),
    )


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Answer unrouted methods on the comment endpoint with the error payload.

    Other HTTP errors (and 405s on other paths) keep FastAPI's default rendering.
    """
    if exc.status_code == 405 and request.url.path == "/":
        logger.info(f"{request.method} / is not a defined method")
        return JSONResponse(
            status_code=200,
            content=undefined_method_response(request.method).model_dump(exclude_none=True),
        )
    return await http_exception_handler(request, exc)
