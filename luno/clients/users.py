"""
Client for /users and the resources nested under a user.

Methods taking a ``user`` accept either the user id or a fetched ``User``.
"""

from typing import Any, Optional, Type

from ..connection import ApiKeyConnection
from ..errors import ArgumentError
from ..models import (
    ApiAuthentication, CreateApiAuthentication, CreateEvent, CreateSession,
    CreateUser, Event, LoginResponse, PaginationResponse, Session,
    SuccessResponse, UpdateUser, User,
)
from .utils import (
    Expand, bool_param, expand_params, list_params, parametrize, require, resolve_id,
)


class UsersClient:
    """Operations on users."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection

    def create(self, user: CreateUser, auto_name: bool = True, expand: Expand = None,
               profile_model: Optional[Type] = None) -> User:
        """
        Create a user.

        Args:
            user: The new user's details
            auto_name: Derive name, first_name and last_name from whichever is given
            expand: Related models to include in the response
            profile_model: Type of the user's custom profile data

        Returns:
            The created user
        """
        require(user, 'user')
        params = {'auto_name': bool_param(auto_name)}
        params.update(expand_params(expand))

        return self.connection.post('/users', user, params,
                                    model=parametrize(User, profile_model))

    def get(self, user: Any, expand: Expand = None,
            profile_model: Optional[Type] = None) -> User:
        """Get a user by id."""
        user_id = resolve_id(user, 'user')
        return self.connection.get(f'/users/{user_id}', expand_params(expand),
                                   model=parametrize(User, profile_model))

    def get_all(self, from_: Optional[str] = None, to: Optional[str] = None,
                limit: int = 100, expand: Expand = None,
                profile_model: Optional[Type] = None) -> PaginationResponse:
        """
        Get a page of recently created users.

        Args:
            from_: Item id to start the page from
            to: Item id to stop the page at
            limit: Maximum number of items, 0 to 200
            expand: Related models to include in the response
        """
        model = PaginationResponse[parametrize(User, profile_model)]
        return self.connection.get('/users', list_params(from_, to, limit, expand), model=model)

    def update(self, user: Any, updated_user: Optional[User] = None, auto_name: bool = True,
               destructive: bool = False) -> SuccessResponse:
        """
        Update a user.

        Either pass the id and the updated user, or just the updated user.

        Args:
            user: User id, or the updated user itself
            updated_user: The updated user when ``user`` is an id
            auto_name: Derive name, first_name and last_name from whichever is given
            destructive: Replace the user entirely (PUT) instead of merging (PATCH)
        """
        user_id = resolve_id(user, 'user')
        if updated_user is None:
            if isinstance(user, str):
                raise ArgumentError("updated_user must not be None")
            updated_user = user

        body = UpdateUser.from_user(updated_user)
        params = {'auto_name': bool_param(auto_name)}
        path = f'/users/{user_id}'
        if destructive:
            return self.connection.put(path, body, params, model=SuccessResponse)
        return self.connection.patch(path, body, params, model=SuccessResponse)

    def deactivate(self, user: Any) -> SuccessResponse:
        """Deactivate a user, setting its ``closed`` timestamp."""
        user_id = resolve_id(user, 'user')
        return self.connection.delete(f'/users/{user_id}', model=SuccessResponse)

    def validate_password(self, user: Any, password: str) -> SuccessResponse:
        """Check that a password is correct without logging the user in."""
        user_id = resolve_id(user, 'user')
        return self.connection.post(f'/users/{user_id}/password/validate',
                                    {'password': password}, model=SuccessResponse)

    def change_password(self, user: Any, new_password: str,
                        current_password: Optional[str] = None) -> SuccessResponse:
        """
        Change or set a user's password.

        Args:
            user: User id or user
            new_password: The new password
            current_password: The current password, if the API should verify it first
        """
        user_id = resolve_id(user, 'user')
        body = {'password': new_password, 'current_password': current_password}
        return self.connection.post(f'/users/{user_id}/password/change', body,
                                    model=SuccessResponse)

    def create_event(self, user: Any, event: CreateEvent, expand: Expand = None,
                     details_model: Optional[Type] = None,
                     profile_model: Optional[Type] = None) -> Event:
        """Trigger an event for this user."""
        user_id = resolve_id(user, 'user')
        require(event, 'event')
        return self.connection.post(f'/users/{user_id}/events', event, expand_params(expand),
                                    model=parametrize(Event, details_model, profile_model))

    def get_events(self, user: Any, from_: Optional[str] = None, to: Optional[str] = None,
                   limit: int = 100, expand: Expand = None,
                   details_model: Optional[Type] = None,
                   profile_model: Optional[Type] = None) -> PaginationResponse:
        """Get a page of events recently triggered by this user."""
        user_id = resolve_id(user, 'user')
        model = PaginationResponse[parametrize(Event, details_model, profile_model)]
        return self.connection.get(f'/users/{user_id}/events',
                                   list_params(from_, to, limit, expand), model=model)

    def login(self, login: str, password: str, expand: Expand = None,
              profile_model: Optional[Type] = None,
              session_model: Optional[Type] = None) -> LoginResponse:
        """
        Log a user in by id, email or username.

        Returns:
            LoginResponse holding the user and the newly created session
        """
        return self.connection.post('/users/login', {'login': login, 'password': password},
                                    expand_params(expand),
                                    model=parametrize(LoginResponse, profile_model, session_model))

    def create_session(self, user: Any, session: Optional[CreateSession] = None,
                       expand: Expand = None, details_model: Optional[Type] = None,
                       profile_model: Optional[Type] = None) -> Session:
        """Create a new session for this user."""
        user_id = resolve_id(user, 'user')
        body = session if session is not None else {}
        return self.connection.post(f'/users/{user_id}/sessions', body, expand_params(expand),
                                    model=parametrize(Session, details_model, profile_model))

    def get_sessions(self, user: Any, from_: Optional[str] = None, to: Optional[str] = None,
                     limit: int = 100, expand: Expand = None,
                     details_model: Optional[Type] = None,
                     profile_model: Optional[Type] = None) -> PaginationResponse:
        """Get a page of sessions owned by this user."""
        user_id = resolve_id(user, 'user')
        model = PaginationResponse[parametrize(Session, details_model, profile_model)]
        return self.connection.get(f'/users/{user_id}/sessions',
                                   list_params(from_, to, limit, expand), model=model)

    def delete_sessions(self, user: Any) -> SuccessResponse:
        """Permanently delete all sessions of this user."""
        user_id = resolve_id(user, 'user')
        return self.connection.delete(f'/users/{user_id}/sessions', model=SuccessResponse)

    def create_api_authentication(self, user: Any,
                                  api_authentication: Optional[CreateApiAuthentication] = None,
                                  expand: Expand = None, details_model: Optional[Type] = None,
                                  profile_model: Optional[Type] = None) -> ApiAuthentication:
        """Create a new API key for this user."""
        user_id = resolve_id(user, 'user')
        body = api_authentication if api_authentication is not None else {}
        model = parametrize(ApiAuthentication, details_model, profile_model)
        return self.connection.post(f'/users/{user_id}/api_authentication', body,
                                    expand_params(expand), model=model)

    def get_all_api_authentications(self, user: Any, from_: Optional[str] = None,
                                    to: Optional[str] = None, limit: int = 100,
                                    expand: Expand = None,
                                    details_model: Optional[Type] = None,
                                    profile_model: Optional[Type] = None) -> PaginationResponse:
        """Get a page of API keys owned by this user."""
        user_id = resolve_id(user, 'user')
        model = PaginationResponse[parametrize(ApiAuthentication, details_model, profile_model)]
        return self.connection.get(f'/users/{user_id}/api_authentication',
                                   list_params(from_, to, limit, expand), model=model)
