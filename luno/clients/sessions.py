"""
Client for /sessions.
"""

from typing import Any, Optional, Type

from ..connection import ApiKeyConnection
from ..errors import ArgumentError
from ..models import CreateSession, PaginationResponse, Session, SuccessResponse, UpdateSession
from .utils import Expand, expand_params, list_params, parametrize, require, resolve_id


class SessionsClient:
    """Operations on sessions. ``session`` arguments take an id or a Session."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection

    def create(self, session: CreateSession, expand: Expand = None,
               details_model: Optional[Type] = None,
               profile_model: Optional[Type] = None) -> Session:
        """Create a session. ``session.user_id`` names the owner."""
        require(session, 'session')
        return self.connection.post('/sessions', session, expand_params(expand),
                                    model=parametrize(Session, details_model, profile_model))

    def get(self, session: Any, expand: Expand = None, details_model: Optional[Type] = None,
            profile_model: Optional[Type] = None) -> Session:
        session_id = resolve_id(session, 'session')
        return self.connection.get(f'/sessions/{session_id}', expand_params(expand),
                                   model=parametrize(Session, details_model, profile_model))

    def get_all(self, from_: Optional[str] = None, to: Optional[str] = None,
                limit: int = 100, expand: Expand = None,
                details_model: Optional[Type] = None,
                profile_model: Optional[Type] = None) -> PaginationResponse:
        model = PaginationResponse[parametrize(Session, details_model, profile_model)]
        return self.connection.get('/sessions', list_params(from_, to, limit, expand), model=model)

    def update(self, session: Any, updated_session: Optional[Session] = None,
               destructive: bool = False) -> SuccessResponse:
        """
        Update a session's ip, user agent and details.

        Args:
            session: Session id, or the updated session itself
            updated_session: The updated session when ``session`` is an id
            destructive: Replace the session details entirely (PUT) instead of merging (PATCH)
        """
        session_id = resolve_id(session, 'session')
        if updated_session is None:
            if isinstance(session, str):
                raise ArgumentError("updated_session must not be None")
            updated_session = session

        body = UpdateSession.from_session(updated_session)
        path = f'/sessions/{session_id}'
        if destructive:
            return self.connection.put(path, body, model=SuccessResponse)
        return self.connection.patch(path, body, model=SuccessResponse)

    def delete(self, session: Any) -> SuccessResponse:
        """Permanently delete a session."""
        session_id = resolve_id(session, 'session')
        return self.connection.delete(f'/sessions/{session_id}', model=SuccessResponse)

    def access(self, key: str, expand: Expand = None, details_model: Optional[Type] = None,
               profile_model: Optional[Type] = None) -> Session:
        """Look a session up by its key, recording the access."""
        require(key, 'key')
        return self.connection.post('/sessions/access', {'key': key}, expand_params(expand),
                                    model=parametrize(Session, details_model, profile_model))
