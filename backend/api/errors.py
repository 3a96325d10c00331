"""
Exception handlers.

This is the only place where error kinds become HTTP status codes. Every
failure, expected or not, is rendered as {"error": message}.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import ErrorKind, InvalidInputError, UsersApiError

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_JSON = "Request body must be valid JSON"
NOT_AN_OBJECT = "Request body must be a JSON object"
INVALID_REQUEST = "Invalid request"

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.SERVER_MISCONFIGURED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def handle_api_error(request: Request, exc: UsersApiError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    headers = None
    if exc.kind is ErrorKind.UNAUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


def validation_message(errors: Sequence[Any]) -> str:
    """
    Pick the single message reported for a failed request validation.

    Undecodable JSON wins, then a body that is not an object, then the
    first field error in declaration order.
    """
    if any(error.get("type") == "json_invalid" for error in errors):
        return INVALID_JSON
    for error in errors:
        if tuple(error.get("loc", ())) == ("body",):
            return NOT_AN_OBJECT
        cause = (error.get("ctx") or {}).get("error")
        if error.get("type") == "value_error" and cause is not None:
            return str(cause)
    return INVALID_REQUEST


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Request validation failed: %s", exc.errors())
    return await handle_api_error(request, InvalidInputError(validation_message(exc.errors())))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(UsersApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
