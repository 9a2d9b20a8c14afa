"""Interface layer error mapping.

Domain errors become HTTP responses in the ``{"success": false, "error": ...}``
envelope. Anything unexpected becomes a generic 500.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from blog.domain.error import (
    DomainError,
    DuplicateNameError,
    ForbiddenError,
    HasDependentsError,
    InvalidCategoryError,
    NotFoundError,
    ValidationFailedError,
)

SERVER_ERROR_MESSAGE = "Server Error"

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    DuplicateNameError: status.HTTP_400_BAD_REQUEST,
    HasDependentsError: status.HTTP_400_BAD_REQUEST,
    ValidationFailedError: status.HTTP_400_BAD_REQUEST,
    InvalidCategoryError: status.HTTP_400_BAD_REQUEST,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unmapped kinds are server errors."""
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Unhandled domain error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(code, SERVER_ERROR_MESSAGE)

    logfire.warn(
        "Request rejected",
        path=request.url.path,
        status_code=code,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(code, str(exc))


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in e['loc'][1:]) or 'body'}: {e['msg']}"
        for e in errors
    )
    logfire.warn("Malformed request", path=request.url.path, error=message)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unexpected error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on an app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
