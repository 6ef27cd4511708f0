"""
Tests for the users client.
"""

import logging

import pytest
from pydantic import BaseModel

from luno.clients.users import UsersClient
from luno.errors import ArgumentError
from luno.models import (
    CreateApiAuthentication, CreateEvent, CreateSession, CreateUser, Event,
    LoginResponse, PaginationResponse, Session, SuccessResponse, User,
)
from tests.fakes import RecordingConnection

USER_DATA = {
    "id": "usr_1",
    "created": "2024-01-01T10:00:00Z",
    "email": "alice@example.com",
    "username": "alice",
    "name": "Alice Smith",
    "first_name": "Alice",
    "last_name": "Smith",
    "profile": {"plan": "pro"},
}

SESSION_DATA = {
    "id": "ses_1",
    "key": "ses_key",
    "ip": "127.0.0.1",
    "user_id": "usr_1",
    "details": {"device": "laptop"},
}

# Validates into every entity model the users client returns
ANY_RESPONSE = {"id": "usr_1", "key": "api_1", "success": True, "list": []}


class Profile(BaseModel):
    plan: str


class SessionDetails(BaseModel):
    device: str


class EventDetails(BaseModel):
    ticket_id: str


BY_REFERENCE_CALLS = [
    pytest.param(lambda users, ref: users.get(ref, expand=["events"]), id="get"),
    pytest.param(lambda users, ref: users.update(ref, User(**USER_DATA), destructive=True),
                 id="update"),
    pytest.param(lambda users, ref: users.deactivate(ref), id="deactivate"),
    pytest.param(lambda users, ref: users.validate_password(ref, "secret"),
                 id="validate_password"),
    pytest.param(lambda users, ref: users.change_password(ref, "new", current_password="old"),
                 id="change_password"),
    pytest.param(lambda users, ref: users.create_event(ref, CreateEvent(name="signup")),
                 id="create_event"),
    pytest.param(lambda users, ref: users.get_events(ref, from_="evt_1", limit=10),
                 id="get_events"),
    pytest.param(lambda users, ref: users.create_session(ref, CreateSession(ip="127.0.0.1")),
                 id="create_session"),
    pytest.param(lambda users, ref: users.get_sessions(ref, to="ses_9", expand=["user"]),
                 id="get_sessions"),
    pytest.param(lambda users, ref: users.delete_sessions(ref), id="delete_sessions"),
    pytest.param(lambda users, ref: users.create_api_authentication(ref),
                 id="create_api_authentication"),
    pytest.param(lambda users, ref: users.get_all_api_authentications(ref),
                 id="get_all_api_authentications"),
]


class TestByReference:
    """Every call taking a user accepts the id or the fetched user."""

    def setup_method(self):
        self.connection = RecordingConnection(ANY_RESPONSE)
        self.users = UsersClient(self.connection)

    @pytest.mark.parametrize("call", BY_REFERENCE_CALLS)
    def test_none_fails_before_request(self, call):
        """Test a None user raises without sending anything."""
        with pytest.raises(ArgumentError):
            call(self.users, None)

        assert self.connection.requests == []

    @pytest.mark.parametrize("call", BY_REFERENCE_CALLS)
    def test_entity_matches_id(self, call):
        """Test passing a user sends the same request as passing its id."""
        call(self.users, "usr_1")
        call(self.users, User(**USER_DATA))

        by_id, by_entity = self.connection.requests
        assert by_id == by_entity
        assert "/users/usr_1" in by_id.path


class TestUsersClient:
    """Test UsersClient requests and responses."""

    def setup_method(self):
        self.connection = RecordingConnection(USER_DATA)
        self.users = UsersClient(self.connection)

    def test_create(self):
        """Test creating a user."""
        new_user = CreateUser(email="alice@example.com", password="secret",
                              first_name="Alice", last_name="Smith")

        user = self.users.create(new_user)

        request = self.connection.last
        assert request.method == "POST"
        assert request.path == "/users"
        assert request.params == {"auto_name": "true"}
        assert request.body == {
            "email": "alice@example.com",
            "password": "secret",
            "first_name": "Alice",
            "last_name": "Smith",
        }
        assert user.id == "usr_1"

    def test_create_auto_name_false(self):
        """Test auto_name is sent as a lowercase literal."""
        self.users.create(CreateUser(name="Alice"), auto_name=False, expand=["events", "sessions"])

        assert self.connection.last.params == {"auto_name": "false", "expand": "events,sessions"}

    def test_create_none(self):
        with pytest.raises(ArgumentError):
            self.users.create(None)
        assert self.connection.requests == []

    def test_get_typed_profile(self):
        """Test profile data is bound to the requested model."""
        user = self.users.get("usr_1", profile_model=Profile)

        assert self.connection.last.path == "/users/usr_1"
        assert self.connection.last.params == {}
        assert isinstance(user, User)
        assert isinstance(user.profile, Profile)
        assert user.profile.plan == "pro"

    def test_get_untyped_profile(self):
        """Test profile stays a dict without a profile model."""
        user = self.users.get("usr_1")

        assert user.profile == {"plan": "pro"}

    def test_get_all_defaults(self):
        """Test only limit is sent when no cursor is given."""
        self.connection.response = {"list": [USER_DATA], "limit": 100}

        page = self.users.get_all()

        assert self.connection.last.method == "GET"
        assert self.connection.last.path == "/users"
        assert self.connection.last.params == {"limit": "100"}
        assert isinstance(page, PaginationResponse)
        assert page.list[0].email == "alice@example.com"

    def test_get_all_with_cursor(self):
        """Test cursor, limit and expand parameters."""
        self.connection.response = {"list": [], "from": "usr_1", "to": "usr_5"}

        page = self.users.get_all(from_="usr_1", to="usr_5", limit=5, expand=["events"])

        assert self.connection.last.params == {
            "limit": "5",
            "from": "usr_1",
            "to": "usr_5",
            "expand": "events",
        }
        assert page.from_ == "usr_1"
        assert page.to == "usr_5"

    def test_update_merges_by_default(self):
        """Test a default update is a PATCH with only mutable fields."""
        self.connection.response = {"success": True}

        result = self.users.update(User(**USER_DATA))

        request = self.connection.last
        assert request.method == "PATCH"
        assert request.path == "/users/usr_1"
        assert request.params == {"auto_name": "true"}
        assert "id" not in request.body
        assert "created" not in request.body
        assert request.body["email"] == "alice@example.com"
        assert isinstance(result, SuccessResponse)
        assert result.success is True

    def test_update_destructive(self):
        """Test a destructive update is a PUT to the same path."""
        self.connection.response = {"success": True}

        self.users.update("usr_1", User(**USER_DATA), auto_name=False, destructive=True)

        request = self.connection.last
        assert request.method == "PUT"
        assert request.path == "/users/usr_1"
        assert request.params == {"auto_name": "false"}

    def test_update_id_without_user(self):
        """Test an id alone is not enough to update."""
        with pytest.raises(ArgumentError):
            self.users.update("usr_1")
        assert self.connection.requests == []

    def test_id_is_escaped(self):
        """Test ids with reserved characters stay inside their path segment."""
        self.connection.response = {"success": True}

        self.users.deactivate("usr 1/?x#y")

        assert self.connection.last.path == "/users/usr%201%2F%3Fx%23y"

    def test_deactivate(self):
        self.connection.response = {"success": True}

        result = self.users.deactivate("usr_1")

        assert self.connection.last.method == "DELETE"
        assert self.connection.last.path == "/users/usr_1"
        assert result.success is True

    def test_validate_password(self):
        self.connection.response = {"success": True}

        self.users.validate_password("usr_1", "secret")

        assert self.connection.last.method == "POST"
        assert self.connection.last.path == "/users/usr_1/password/validate"
        assert self.connection.last.body == {"password": "secret"}

    def test_change_password(self):
        """Test both the short and the extended password change."""
        self.connection.response = {"success": True}

        self.users.change_password("usr_1", "new")
        self.users.change_password("usr_1", "new", current_password="old")

        short, extended = self.connection.requests
        assert short.path == "/users/usr_1/password/change"
        assert short.body == {"password": "new", "current_password": None}
        assert extended.body == {"password": "new", "current_password": "old"}

    def test_create_event(self):
        """Test triggering an event with typed details."""
        self.connection.response = {
            "id": "evt_1",
            "name": "purchase",
            "user_id": "usr_1",
            "details": {"ticket_id": "t-42"},
        }

        event = self.users.create_event(
            "usr_1",
            CreateEvent(name="purchase", details={"ticket_id": "t-42"}),
            details_model=EventDetails,
        )

        assert self.connection.last.path == "/users/usr_1/events"
        assert self.connection.last.body == {"name": "purchase", "details": {"ticket_id": "t-42"}}
        assert isinstance(event, Event)
        assert event.details.ticket_id == "t-42"

    def test_get_events_expanded_user(self):
        """Test expanded users on events carry the profile model."""
        self.connection.response = {
            "list": [{"id": "evt_1", "name": "login", "user": USER_DATA}],
        }

        page = self.users.get_events("usr_1", expand=["user"], profile_model=Profile)

        assert self.connection.last.params == {"limit": "100", "expand": "user"}
        assert page.list[0].user.profile.plan == "pro"

    def test_create_session_without_details(self):
        """Test an empty body is sent when no session is given."""
        self.connection.response = SESSION_DATA

        session = self.users.create_session("usr_1")

        assert self.connection.last.method == "POST"
        assert self.connection.last.path == "/users/usr_1/sessions"
        assert self.connection.last.body == {}
        assert isinstance(session, Session)
        assert session.key == "ses_key"

    def test_delete_sessions(self):
        self.connection.response = {"success": True}

        self.users.delete_sessions("usr_1")

        assert self.connection.last.method == "DELETE"
        assert self.connection.last.path == "/users/usr_1/sessions"

    def test_create_api_authentication(self):
        self.connection.response = {"key": "api_1", "secret": "s3cret", "user_id": "usr_1"}

        api_auth = self.users.create_api_authentication(
            "usr_1", CreateApiAuthentication(details={"label": "ci"}))

        assert self.connection.last.path == "/users/usr_1/api_authentication"
        assert self.connection.last.body == {"details": {"label": "ci"}}
        assert api_auth.secret == "s3cret"

    def test_get_all_api_authentications(self):
        self.connection.response = {"list": [{"key": "api_1"}]}

        page = self.users.get_all_api_authentications("usr_1", limit=20)

        assert self.connection.last.method == "GET"
        assert self.connection.last.path == "/users/usr_1/api_authentication"
        assert self.connection.last.params == {"limit": "20"}
        assert page.list[0].key == "api_1"


class TestLogin:
    """Test logging a user in."""

    def setup_method(self):
        self.connection = RecordingConnection({"user": USER_DATA, "session": SESSION_DATA})
        self.users = UsersClient(self.connection)

    def test_login(self):
        """Test login returns the user and session with their own models."""
        result = self.users.login("alice@example.com", "secret",
                                  profile_model=Profile, session_model=SessionDetails)

        request = self.connection.last
        assert request.method == "POST"
        assert request.path == "/users/login"
        assert request.body == {"login": "alice@example.com", "password": "secret"}
        assert request.params == {}

        assert isinstance(result, LoginResponse)
        assert isinstance(result.user.profile, Profile)
        assert isinstance(result.session.details, SessionDetails)
        assert result.user.id == "usr_1"
        assert result.session.details.device == "laptop"

    def test_login_untyped(self):
        result = self.users.login("alice", "secret", expand=["user"])

        assert self.connection.last.params == {"expand": "user"}
        assert result.user.profile == {"plan": "pro"}
        assert result.session.details == {"device": "laptop"}

    def test_login_not_logged(self, caplog):
        """Test the login name never reaches the logs."""
        with caplog.at_level(logging.DEBUG, logger="luno"):
            self.users.login("alice@example.com", "secret")

        assert "alice@example.com" not in caplog.text
        assert "secret" not in caplog.text
