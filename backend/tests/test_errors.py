import pytest


@pytest.fixture
def failing_app(app):
    @app.route("/api/boom")
    def boom():
        raise RuntimeError("database exploded")

    return app


def test_unknown_route_is_json(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "error": "Not found"}


def test_wrong_method_is_json(client):
    response = client.get("/api/auth/login")

    assert response.status_code == 405
    assert response.get_json()["error"] == "Method not allowed"
    assert "POST" in response.headers["Allow"]


def test_unexpected_error_hides_details(failing_app):
    response = failing_app.test_client().get("/api/boom")

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "error": "Internal server error"}


def test_unexpected_error_details_when_exposed(failing_app):
    failing_app.config["EXPOSE_ERROR_DETAILS"] = True

    body = failing_app.test_client().get("/api/boom").get_json()

    assert body["message"] == "database exploded"
    assert "RuntimeError" in body["trace"]


def test_security_headers(client):
    response = client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "frame-ancestors 'none'" in response.headers["Content-Security-Policy"]


def test_legacy_php_alias(client):
    assert client.get("/api/health.php").status_code == 200


def test_invalid_json_body(admin_client):
    response = admin_client.post(
        "/api/houses/create", data="[1, 2]", content_type="application/json"
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid JSON body"
