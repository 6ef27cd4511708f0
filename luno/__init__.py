"""
Luno SDK

A typed Python client for the Luno users, sessions, events and analytics API.
"""

from .client import LunoClient
from .connection import ApiKeyConnection
from .errors import (
    ApiError, ArgumentError, AuthError, ConfigurationError, LunoError,
    NotFoundError, ResponseError, TransportError, ValidationError,
)
from .models import (
    ApiAuthentication, CreateApiAuthentication, CreateEvent, CreateSession,
    CreateUser, Event, LoginResponse, PaginationResponse, Session,
    SuccessResponse, User,
)

__version__ = "1.0.0"

__all__ = [
    "LunoClient",
    "ApiKeyConnection",
    "LunoError",
    "ArgumentError",
    "ConfigurationError",
    "TransportError",
    "ResponseError",
    "ApiError",
    "NotFoundError",
    "ValidationError",
    "AuthError",
    "User",
    "CreateUser",
    "Event",
    "CreateEvent",
    "Session",
    "CreateSession",
    "ApiAuthentication",
    "CreateApiAuthentication",
    "LoginResponse",
    "PaginationResponse",
    "SuccessResponse",
]
