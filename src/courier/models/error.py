"""Error models for the Pub/Sub API error envelope."""

from typing import Any, Optional

from courier.models.base import CamelCaseModel


class ErrorDetails(CamelCaseModel):
    """One entry of the legacy ``errors`` list."""

    domain: Optional[str] = None
    reason: Optional[str] = None
    message: Optional[str] = None


class ErrorInfo(CamelCaseModel):
    """Structured error information."""

    code: int
    message: str = ""
    status: Optional[str] = None  # NOT_FOUND, ALREADY_EXISTS, INVALID_ARGUMENT, ...
    errors: list[ErrorDetails] = []
    details: list[dict[str, Any]] = []


class ErrorResponse(CamelCaseModel):
    """Body returned by the service on any non-2xx response."""

    error: ErrorInfo
