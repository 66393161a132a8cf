import pytest
from fastapi.testclient import TestClient

from notes_backend.api.config import Settings
from notes_backend.api.main import create_app


@pytest.fixture
def settings():
    """Settings pointing at a fresh in-memory SQLite database."""
    return Settings(database_url="sqlite://", secret_key="test-secret")


@pytest.fixture
def app(settings):
    """A new application (and so a new, empty database) per test."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Fixture for FastAPI TestClient."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_client(app):
    """Factory for extra clients on the same app, each with its own cookie jar."""
    clients = []

    def _make():
        c = TestClient(app)
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def user_data():
    """Returns default user data for registration."""
    return {"username": "alice", "password": "alicepassword123"}


@pytest.fixture
def second_user_data():
    """Returns a second user's data."""
    return {"username": "bob", "password": "bobpassword456"}


def register_and_login(client, username, password):
    """Helper for registering then logging in; the session cookie stays in the client's jar."""
    r1 = client.post("/register", json={"username": username, "password": password})
    assert r1.status_code in (201, 409)

    r2 = client.post("/login", json={"username": username, "password": password})
    assert r2.status_code == 200
    return r2.cookies["session_token"]


@pytest.fixture
def auth_client(client, user_data):
    """Client logged in as the default user."""
    register_and_login(client, user_data["username"], user_data["password"])
    return client


@pytest.fixture
def second_auth_client(make_client, second_user_data):
    """Separate client logged in as the second user."""
    c = make_client()
    register_and_login(c, second_user_data["username"], second_user_data["password"])
    return c
