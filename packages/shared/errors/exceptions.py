"""Exceptions raised by the ranked list HTTP surface. The JSON-LD core never raises."""

from typing import Any, Optional


class RankedListException(Exception):
    """Base exception for the ranked list schema service."""

    def __init__(
        self,
        message: str,
        code: str = "RLS_000",
        category: str = "system",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}
        super().__init__(message)


class ValidationError(RankedListException):
    """Malformed content tree or records - 400 Bad Request."""

    def __init__(
        self,
        message: str,
        code: str = "RLS_400",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, "permanent", details)


class PayloadTooLargeError(RankedListException):
    """Content tree exceeds the configured node limit - 413."""

    def __init__(
        self,
        message: str,
        code: str = "RLS_413",
        limit: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        d = details or {}
        if limit is not None:
            d["limit"] = limit
        super().__init__(message, code, "permanent", d)
