"""Standardized error handling for the ranked list schema service."""

from .models import (
    ErrorDetail,
    ErrorResponse,
    MachineReadableError,
    create_error_response,
)
from .exceptions import (
    RankedListException,
    ValidationError,
    PayloadTooLargeError,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "MachineReadableError",
    "create_error_response",
    "RankedListException",
    "ValidationError",
    "PayloadTooLargeError",
]
