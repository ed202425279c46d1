"""Error response envelope returned by the ranked list schema service."""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field


def _utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


class ErrorDetail(BaseModel):
    """Error details for API responses."""

    code: str = Field(..., description="Error code, RLS_<status>")
    message: str = Field(..., description="Human-readable error message")
    category: str = Field(..., description="Error category: permanent or system")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional context (limit, node_count, field errors)",
    )
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
    timestamp: str = Field(default_factory=_utc_now, description="ISO 8601 timestamp")


class MachineReadableError(BaseModel):
    """Error as a schema.org Thing, mirroring the JSON-LD the service emits on success."""

    context: str = Field(default="https://schema.org", alias="@context")
    type: str = Field(default="Thing", alias="@type")
    name: str = "Error"
    identifier: str = Field(..., description="Error code")
    description: str = Field(..., description="Error description")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: ErrorDetail
    machine_readable: Optional[MachineReadableError] = None


def create_error_response(
    code: str,
    message: str,
    category: str = "system",
    details: Optional[dict[str, Any]] = None,
    request_id: Optional[str] = None,
    include_machine_readable: bool = True,
) -> ErrorResponse:
    """Build the error envelope, optionally with its JSON-LD block."""
    error_detail = ErrorDetail(
        code=code,
        message=message,
        category=category,
        details=details,
        request_id=request_id,
    )
    machine_readable = None
    if include_machine_readable:
        machine_readable = MachineReadableError(identifier=code, description=message)
    return ErrorResponse(error=error_detail, machine_readable=machine_readable)
