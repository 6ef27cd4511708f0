"""
Exception types raised by the Luno client.
"""

from typing import Any, Dict, Optional


class LunoError(Exception):
    """Base class for all client errors."""


class ArgumentError(LunoError, ValueError):
    """A required argument was missing. Raised before any request is sent."""


class ConfigurationError(LunoError):
    """Client configuration is incomplete."""


class TransportError(LunoError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        super().__init__(message)
        self.original = original


class ResponseError(LunoError):
    """A successful response could not be decoded."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class ApiError(LunoError):
    """Error reported by the API."""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None,
                 description: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.description = description
        self.extra = extra or {}

    def __str__(self) -> str:
        if self.code:
            return f"{self.status_code} {self.code}: {self.message}"
        return f"{self.status_code}: {self.message}"


class NotFoundError(ApiError):
    """The requested resource does not exist."""


class ValidationError(ApiError):
    """The API rejected the request payload."""


class AuthError(ApiError):
    """Credentials were rejected or lack permission."""


_STATUS_ERRORS = {
    400: ValidationError,
    401: AuthError,
    403: AuthError,
    404: NotFoundError,
    409: ValidationError,
    422: ValidationError,
}


def error_for_status(status_code: int, body: Any, reason: Optional[str] = None) -> ApiError:
    """
    Build the typed error for a failed response.

    Args:
        status_code: HTTP status of the response
        body: Decoded JSON body, or None if the body was not JSON
        reason: HTTP reason phrase, used when the body carries no message

    Returns:
        An ApiError subclass instance matching the status code
    """
    error_class = _STATUS_ERRORS.get(status_code, ApiError)
    if not isinstance(body, dict):
        body = {}

    message = body.get('message') or reason or 'Request failed'
    return error_class(
        status_code,
        message,
        code=body.get('code'),
        description=body.get('description'),
        extra=body.get('extra'),
    )
