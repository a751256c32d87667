from datetime import datetime, timedelta, timezone

from flask import jsonify, request
from flask_jwt_extended import (
    create_access_token,
    get_csrf_token,
    get_jwt,
    get_jwt_identity,
    set_access_cookies,
)

from province_portal.extensions import jwt
from province_portal.models.admin_user import AdminUser

CSRF_HEADER = "X-CSRF-Token"
NO_REFRESH_ENDPOINTS = {"api.logout"}


def issue_session_token(user):
    """Return ``(access_token, csrf_token)`` for a freshly authenticated user."""
    token = create_access_token(identity=str(user.id), additional_claims={"role": user.role})
    return token, get_csrf_token(token)


def attach_session(response, token, csrf_token):
    set_access_cookies(response, token)
    response.headers[CSRF_HEADER] = csrf_token
    return response


def _unauthorized(message="Unauthorized"):
    return jsonify({"success": False, "error": message}), 401


def session_middleware(app):
    @jwt.user_lookup_loader
    def load_admin_user(_jwt_header, jwt_data):
        # Re-read on every request so deleted or demoted accounts lose access at once.
        return AdminUser.query.filter_by(id=int(jwt_data["sub"])).first()

    @jwt.user_lookup_error_loader
    def handle_missing_user(_jwt_header, _jwt_data):
        return _unauthorized()

    @jwt.unauthorized_loader
    def handle_missing_session(_reason):
        return _unauthorized()

    @jwt.invalid_token_loader
    def handle_invalid_session(_reason):
        return _unauthorized()

    @jwt.expired_token_loader
    def handle_expired_session(_jwt_header, _jwt_data):
        return _unauthorized("Session expired")

    @app.after_request
    def refresh_expiring_session(response):
        """Slide the session: re-issue the cookie once half its lifetime has passed."""
        if request.endpoint in NO_REFRESH_ENDPOINTS:
            return response

        try:
            claims = get_jwt()
            exp_timestamp = claims["exp"]
        except (RuntimeError, KeyError):
            # No verified session on this request.
            return response

        lifetime = app.config["JWT_ACCESS_TOKEN_EXPIRES"]
        target = datetime.now(timezone.utc) + lifetime / 2
        if target.timestamp() > exp_timestamp:
            token = create_access_token(
                identity=get_jwt_identity(),
                additional_claims={"role": claims.get("role")},
            )
            attach_session(response, token, get_csrf_token(token))

        return response
