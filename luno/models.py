"""
Pydantic models for the Luno API.

Custom data attached to users, events, sessions and API keys is typed
through generic parameters, e.g. ``User[MyProfile]``. Unparametrized
models keep custom data as plain dicts.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar('T')
TUser = TypeVar('TUser')
TSession = TypeVar('TSession')


class LunoModel(BaseModel):
    """Base model; keeps fields the client does not know about."""
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to its JSON wire representation."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


# Users

class User(LunoModel, Generic[T]):
    """A user as returned by the API."""
    id: str
    created: Optional[datetime] = None
    closed: Optional[datetime] = None
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile: Optional[T] = None


class CreateUser(LunoModel, Generic[T]):
    """Details for a new user."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile: Optional[T] = None


class UpdateUser(LunoModel, Generic[T]):
    """Mutable user fields sent on update."""
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile: Optional[T] = None

    @classmethod
    def from_user(cls, user: Any) -> 'UpdateUser':
        """Copy the mutable fields of a fetched user, dropping id and timestamps."""
        return cls(
            username=user.username,
            email=user.email,
            name=user.name,
            first_name=user.first_name,
            last_name=user.last_name,
            profile=user.profile,
        )


# Events

class Event(LunoModel, Generic[T, TUser]):
    """An event triggered by a user. ``user`` is set when expanded."""
    id: str
    name: Optional[str] = None
    created: Optional[datetime] = None
    user_id: Optional[str] = None
    user: Optional[User[TUser]] = None
    details: Optional[T] = None


class CreateEvent(LunoModel, Generic[T]):
    """A new event. ``user_id`` is only needed when posting to /events."""
    name: str
    user_id: Optional[str] = None
    details: Optional[T] = None


class UpdateEvent(LunoModel, Generic[T]):
    name: Optional[str] = None
    details: Optional[T] = None

    @classmethod
    def from_event(cls, event: Any) -> 'UpdateEvent':
        return cls(name=event.name, details=event.details)


# Sessions

class Session(LunoModel, Generic[T, TUser]):
    """A login session."""
    id: str
    key: Optional[str] = None
    created: Optional[datetime] = None
    expires: Optional[datetime] = None
    last_access: Optional[datetime] = None
    access_count: Optional[int] = None
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    user_id: Optional[str] = None
    user: Optional[User[TUser]] = None
    details: Optional[T] = None


class CreateSession(LunoModel, Generic[T]):
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    user_id: Optional[str] = None
    details: Optional[T] = None


class UpdateSession(LunoModel, Generic[T]):
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    details: Optional[T] = None

    @classmethod
    def from_session(cls, session: Any) -> 'UpdateSession':
        return cls(ip=session.ip, user_agent=session.user_agent, details=session.details)


# API authentication

class ApiAuthentication(LunoModel, Generic[T, TUser]):
    """An API key. The key itself is the identifier."""
    key: str
    secret: Optional[str] = None
    created: Optional[datetime] = None
    last_access: Optional[datetime] = None
    user_id: Optional[str] = None
    user: Optional[User[TUser]] = None
    details: Optional[T] = None


class CreateApiAuthentication(LunoModel, Generic[T]):
    user_id: Optional[str] = None
    details: Optional[T] = None


class UpdateApiAuthentication(LunoModel, Generic[T]):
    details: Optional[T] = None

    @classmethod
    def from_api_authentication(cls, api_authentication: Any) -> 'UpdateApiAuthentication':
        return cls(details=api_authentication.details)


# Responses

class LoginResponse(LunoModel, Generic[TUser, TSession]):
    """Result of a successful login."""
    user: User[TUser]
    session: Session[TSession, TUser]


class PaginationResponse(LunoModel, Generic[T]):
    """
    One page of a cursor paginated list.

    ``from_`` and ``to`` are the ids bounding the page; pass them back to
    the list call to fetch the neighbouring page.
    """
    from_: Optional[str] = Field(default=None, alias='from')
    to: Optional[str] = None
    limit: Optional[int] = None
    total: Optional[int] = None
    list: List[T] = Field(default_factory=list)


class SuccessResponse(LunoModel):
    success: bool = True


# Analytics

class AnalyticsOverview(LunoModel):
    """Totals per resource."""
    users: Optional[int] = None
    sessions: Optional[int] = None
    events: Optional[int] = None


class AnalyticsPoint(LunoModel):
    date: str
    count: int = 0


class AnalyticsTimeline(LunoModel):
    """Counts over time for one resource or event name."""
    total: Optional[int] = None
    list: List[AnalyticsPoint] = Field(default_factory=list)
