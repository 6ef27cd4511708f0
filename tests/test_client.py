"""
Tests for LunoClient.
"""

import pytest

from luno import LunoClient
from luno.clients import (
    AnalyticsClient, ApiAuthenticationClient, EventsClient, SessionsClient, UsersClient,
)
from luno.errors import ConfigurationError
from tests.fakes import RecordingConnection


class TestLunoClient:
    """Test the aggregate client."""

    def setup_method(self):
        self.connection = RecordingConnection({"success": True})
        self.client = LunoClient(self.connection)

    def test_resource_clients(self):
        """Test every resource client shares the one connection."""
        assert isinstance(self.client.users, UsersClient)
        assert isinstance(self.client.sessions, SessionsClient)
        assert isinstance(self.client.events, EventsClient)
        assert isinstance(self.client.analytics, AnalyticsClient)
        assert isinstance(self.client.api_authentication, ApiAuthenticationClient)

        for resource in (self.client.users, self.client.sessions, self.client.events,
                         self.client.analytics, self.client.api_authentication):
            assert resource.connection is self.connection

    def test_requests_go_through_connection(self):
        self.client.users.deactivate("usr_1")
        self.client.sessions.delete("ses_1")

        assert [r.path for r in self.connection.requests] == ["/users/usr_1", "/sessions/ses_1"]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LUNO_API_KEY", "env-key")
        monkeypatch.setenv("LUNO_API_SECRET", "env-secret")

        client = LunoClient.from_env()

        assert client.connection.key == "env-key"
        assert client.users.connection is client.connection

    def test_from_env_missing(self, monkeypatch):
        monkeypatch.delenv("LUNO_API_KEY", raising=False)
        monkeypatch.delenv("LUNO_API_SECRET", raising=False)

        with pytest.raises(ConfigurationError):
            LunoClient.from_env()
