"""FastAPI request ID middleware and exception handlers."""

import logging
import uuid
from typing import Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .models import create_error_response
from .exceptions import (
    RankedListException,
    ValidationError,
    PayloadTooLargeError,
)

logger = logging.getLogger(__name__)

EXCEPTION_STATUS_MAP = {
    ValidationError: 400,
    PayloadTooLargeError: 413,
}


def get_request_id(request: Request) -> str:
    """Get or create request ID for correlation."""
    request_id = request.headers.get("X-Request-ID") or getattr(
        request.state, "request_id", None
    )
    if not request_id:
        request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    return request_id


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    request_id = get_request_id(request)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


def _error_json(request_id: str, status: int, exc: RankedListException) -> JSONResponse:
    error_response = create_error_response(
        code=exc.code,
        message=exc.message,
        category=exc.category,
        details=exc.details,
        request_id=request_id,
    )
    return JSONResponse(
        status_code=status,
        content=error_response.model_dump(by_alias=True),
        headers={"X-Request-ID": request_id},
    )


def ranked_list_exception_handler(request: Request, exc: RankedListException) -> JSONResponse:
    """Map service exceptions to the error envelope."""
    request_id = get_request_id(request)
    status = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    logger.warning(
        "Ranked list request rejected",
        extra={
            "request_id": request_id,
            "context": {"error_code": exc.code, "category": exc.category},
        },
    )
    return _error_json(request_id, status, exc)


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body that does not match the request model - 400 with field errors."""
    request_id = get_request_id(request)
    errors = [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    error = ValidationError("Invalid request body", details={"errors": errors})
    return _error_json(request_id, 400, error)


def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Unexpected exceptions - 500 with a generic message."""
    request_id = get_request_id(request)
    error_response = create_error_response(
        code="RLS_500",
        message="An unexpected error occurred. Please try again later.",
        category="system",
        request_id=request_id,
    )
    logger.exception(
        "Unhandled exception",
        extra={"request_id": request_id},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(by_alias=True),
        headers={"X-Request-ID": request_id},
    )
