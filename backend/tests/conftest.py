"""
Shared fixtures: a fresh application per test backed by in-memory SQLite,
a seeded admin account and a client that is already signed in.
"""
import pytest
from flask import Flask
from flask.testing import FlaskClient

from province_portal import create_app
from province_portal.extensions import db
from province_portal.models.admin_user import AdminUser

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-1"
EDITOR_USERNAME = "editor"
EDITOR_PASSWORD = "editor-pass-1"


def _add_user(username: str, password: str, role: str) -> None:
    user = AdminUser()
    user.username = username
    user.role = role
    user.set_password(password)
    db.session.add(user)


@pytest.fixture
def app(tmp_path) -> Flask:
    """
    Application configured for testing.

    No app context is left pushed while the test runs, so every request gets
    its own context and session the way it would under a real server.
    """
    app = create_app("testing")
    app.config.update(UPLOAD_FOLDER=str(tmp_path / "uploads"))

    with app.app_context():
        db.create_all()
        _add_user(ADMIN_USERNAME, ADMIN_PASSWORD, "admin")
        _add_user(EDITOR_USERNAME, EDITOR_PASSWORD, "editor")
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username: str = ADMIN_USERNAME, password: str = ADMIN_PASSWORD):
        return client.post("/api/auth/login", json={"username": username, "password": password})
    return _login


def _signed_in(client, login, username, password) -> FlaskClient:
    response = login(username, password)
    assert response.status_code == 200, response.get_json()
    client.environ_base["HTTP_X_CSRF_TOKEN"] = response.get_json()["csrf_token"]
    return client


@pytest.fixture
def admin_client(client, login) -> FlaskClient:
    """Client holding an admin session cookie and sending the CSRF header."""
    return _signed_in(client, login, ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def editor_client(client, login) -> FlaskClient:
    return _signed_in(client, login, EDITOR_USERNAME, EDITOR_PASSWORD)


@pytest.fixture
def anon_client(app) -> FlaskClient:
    """A second client with no session, for public-visibility checks."""
    return app.test_client()
