from datetime import timedelta

import pytest

from province_portal import create_app
from province_portal.config import TestingConfig
from province_portal.extensions import db
from province_portal.models.admin_user import AdminUser

from .conftest import ADMIN_PASSWORD, ADMIN_USERNAME


class RateLimitedConfig(TestingConfig):
    RATELIMIT_ENABLED = True


@pytest.fixture
def rate_limited_client():
    app = create_app(RateLimitedConfig)
    with app.app_context():
        db.create_all()

    yield app.test_client()

    with app.app_context():
        db.session.remove()
        db.drop_all()


class TestLogin:
    def test_successful_login_returns_user_and_csrf_token(self, client, login):
        response = login()

        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert body["user"]["username"] == ADMIN_USERNAME
        assert body["user"]["role"] == "admin"
        assert body["csrf_token"]
        assert response.headers["X-CSRF-Token"] == body["csrf_token"]

    def test_missing_credentials(self, login):
        response = login(ADMIN_USERNAME, "")

        assert response.status_code == 400
        assert response.get_json()["error"] == "Username and password required"

    def test_unknown_user_and_wrong_password_look_the_same(self, login):
        unknown = login("nobody", "whatever-123")
        wrong = login(ADMIN_USERNAME, "wrong-password")

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.get_json()["error"] == wrong.get_json()["error"] == "Invalid credentials"

    def test_account_locks_after_repeated_failures(self, app, login):
        for _ in range(app.config["MAX_LOGIN_ATTEMPTS"]):
            assert login(ADMIN_USERNAME, "wrong-password").status_code == 401

        locked = login()

        assert locked.status_code == 423
        assert locked.get_json()["error"] == "Account locked. Please try again later."

        with app.app_context():
            user = AdminUser.query.filter_by(username=ADMIN_USERNAME).one()
            assert user.failed_attempts == app.config["MAX_LOGIN_ATTEMPTS"]
            assert user.locked_until is not None

    def test_success_resets_failure_counter(self, app, login):
        login(ADMIN_USERNAME, "wrong-password")
        login(ADMIN_USERNAME, "wrong-password")

        assert login().status_code == 200

        with app.app_context():
            user = AdminUser.query.filter_by(username=ADMIN_USERNAME).one()
            assert user.failed_attempts == 0
            assert user.last_login is not None

    def test_body_must_be_an_object(self, client):
        response = client.post("/api/auth/login", json=[ADMIN_USERNAME, ADMIN_PASSWORD])

        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid JSON body"

    def test_login_requires_post(self, client):
        response = client.get("/api/auth/login.php")

        assert response.status_code == 405
        assert response.get_json()["error"] == "Method not allowed"


class TestLoginRateLimit:
    def test_sixth_attempt_in_window_is_throttled(self, rate_limited_client):
        def attempt():
            return rate_limited_client.post(
                "/api/auth/login", json={"username": "nobody", "password": "wrong-password"}
            )

        statuses = [attempt().status_code for _ in range(5)]
        throttled = attempt()

        assert statuses == [401] * 5
        assert throttled.status_code == 429
        assert throttled.get_json()["error"] == "Too many requests. Please try again later."
        assert int(throttled.headers["Retry-After"]) > 0


class TestSessionCheck:
    def test_anonymous_check(self, client):
        response = client.get("/api/auth/check")

        assert response.status_code == 200
        assert response.get_json()["authenticated"] is False

    def test_signed_in_check(self, admin_client):
        body = admin_client.get("/api/auth/check.php").get_json()

        assert body["authenticated"] is True
        assert body["user"]["username"] == ADMIN_USERNAME
        assert body["csrf_token"] == admin_client.environ_base["HTTP_X_CSRF_TOKEN"]

    def test_logout_ends_session(self, admin_client):
        response = admin_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.get_json()["message"] == "Logged out successfully"
        assert admin_client.get("/api/auth/check").get_json()["authenticated"] is False

    def test_deleted_account_loses_session(self, app, admin_client):
        with app.app_context():
            db.session.delete(AdminUser.query.filter_by(username=ADMIN_USERNAME).one())
            db.session.commit()

        response = admin_client.post("/api/pages/create", json={"title": "x"})

        assert response.status_code == 401


class TestSlidingSession:
    @staticmethod
    def reissued_cookies(response):
        return [c for c in response.headers.getlist("Set-Cookie") if c.startswith("access_token_cookie=")]

    def test_fresh_session_is_left_alone(self, admin_client):
        response = admin_client.get("/api/auth/check")

        assert response.get_json()["authenticated"] is True
        assert self.reissued_cookies(response) == []

    def test_session_past_half_life_is_reissued(self, app, admin_client):
        # The cookie from login now has less than half of the new lifetime left.
        app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(seconds=app.config["SESSION_TIMEOUT"] * 4)

        response = admin_client.get("/api/auth/check")

        assert response.get_json()["authenticated"] is True
        assert len(self.reissued_cookies(response)) == 1
        assert response.headers["X-CSRF-Token"]

    def test_logout_is_not_refreshed(self, app, admin_client):
        app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(seconds=app.config["SESSION_TIMEOUT"] * 4)

        response = admin_client.post("/api/auth/logout")

        cookies = self.reissued_cookies(response)
        assert len(cookies) == 1
        assert cookies[0].startswith("access_token_cookie=;")


class TestAccessControl:
    def test_mutation_without_session(self, client):
        response = client.post("/api/pages/create", json={"title": "x"})

        assert response.status_code == 401
        assert response.get_json()["success"] is False

    def test_mutation_without_csrf_token(self, client, login):
        login()

        response = client.post("/api/pages/create", json={"title": "x"})

        assert response.status_code == 403
        assert response.get_json()["error"] == "Invalid CSRF token"

    def test_mutation_with_wrong_csrf_token(self, client, login):
        login()

        response = client.post(
            "/api/pages/create", json={"title": "x"}, headers={"X-CSRF-Token": "forged"}
        )

        assert response.status_code == 403

    def test_editor_cannot_mutate(self, editor_client):
        response = editor_client.post("/api/pages/create", json={"title": "x"})

        assert response.status_code == 401

    def test_editor_can_check_session(self, editor_client):
        body = editor_client.get("/api/auth/check").get_json()

        assert body["authenticated"] is True
        assert body["user"]["role"] == "editor"

    def test_admin_password_still_works_after_failed_csrf(self, client, login):
        login()
        client.post("/api/pages/create", json={"title": "x"})

        assert login(ADMIN_USERNAME, ADMIN_PASSWORD).status_code == 200
