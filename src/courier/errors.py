"""Exceptions raised for failed Pub/Sub API calls."""

from typing import Optional

import httpx
from pydantic import ValidationError

from courier.models.error import ErrorDetails, ErrorInfo, ErrorResponse


class ApiError(Exception):
    """
    A request the service rejected.

    Carries the numeric HTTP ``code`` of the response. The client never
    interprets or retries these; they are raised to the caller as-is.
    """

    code: int = 0

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        status: Optional[str] = None,
        errors: Optional[list[ErrorDetails]] = None,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.status = status
        self.errors = errors or []
        self.response = response

    def __str__(self) -> str:
        return f"{self.code} {self.message}"


class InvalidArgument(ApiError):
    code = 400


class Unauthenticated(ApiError):
    code = 401


class PermissionDenied(ApiError):
    code = 403


class NotFound(ApiError):
    code = 404


class AlreadyExists(ApiError):
    code = 409


_ERRORS_BY_CODE: dict[int, type[ApiError]] = {
    cls.code: cls
    for cls in (InvalidArgument, Unauthenticated, PermissionDenied, NotFound, AlreadyExists)
}


def error_from_info(info: ErrorInfo, response: Optional[httpx.Response] = None) -> ApiError:
    """Build the ApiError subclass matching ``info.code``."""
    error_cls = _ERRORS_BY_CODE.get(info.code, ApiError)
    return error_cls(
        info.message,
        code=info.code,
        status=info.status,
        errors=info.errors,
        response=response,
    )


def error_from_response(response: httpx.Response) -> ApiError:
    """
    Build an ApiError from a non-2xx HTTP response.

    The service wraps errors in ``{"error": {...}}``. Anything else (proxy
    pages, empty bodies) is reported with the raw text and the HTTP status.
    """
    try:
        info = ErrorResponse.model_validate_json(response.content).error
    except ValidationError:
        info = ErrorInfo(code=response.status_code, message=response.text or response.reason_phrase)
    return error_from_info(info, response=response)
