"""
Client for the Luno API.
"""

from .clients import (
    AnalyticsClient, ApiAuthenticationClient, EventsClient, SessionsClient, UsersClient,
)
from .connection import ApiKeyConnection


class LunoClient:
    """Entry point grouping the resource clients over one connection."""

    def __init__(self, connection: ApiKeyConnection):
        self.connection = connection
        self.analytics = AnalyticsClient(connection)
        self.api_authentication = ApiAuthenticationClient(connection)
        self.events = EventsClient(connection)
        self.sessions = SessionsClient(connection)
        self.users = UsersClient(connection)

    @classmethod
    def from_env(cls) -> 'LunoClient':
        """Create a client from LUNO_API_KEY, LUNO_API_SECRET and LUNO_BASE_URL."""
        return cls(ApiKeyConnection.from_env())

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
