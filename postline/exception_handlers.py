"""
Global exception handlers

Error response format:
{
    "error": {
        "status_code": 404,
        "error_code": "NOT_FOUND",
        "message": "Post with id 'p1' not found",
        "type": "Not Found",
        "details": {"resource_type": "Post", "resource_id": "p1"},
        "path": "/health"
    }
}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from postline.exceptions import PostlineError

logger = logging.getLogger(__name__)

ERROR_TYPES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Validation Error",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": ERROR_TYPES.get(status_code, "Error"),
        }
    }

    if error_code:
        error_response["error"]["error_code"] = error_code
    if details:
        error_response["error"]["details"] = details
    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


async def postline_exception_handler(request: Request, exc: PostlineError) -> JSONResponse:
    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(log_level, f"{exc.code}: {exc.message}", extra={"path": request.url.path})

    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.code,
        details=exc.details,
        path=str(request.url.path),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred",
        error_code=PostlineError.code,
        path=str(request.url.path),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostlineError, postline_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
