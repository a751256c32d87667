from flask import current_app, jsonify
from flask_jwt_extended import get_jwt, unset_jwt_cookies

from province_portal.application.auth.login import authenticate
from province_portal.extensions import limiter
from province_portal.middleware.session import attach_session, issue_session_token
from province_portal.normalizers.user import normalize_user
from province_portal.utils.decorators import with_viewer
from province_portal.utils.request_body import json_body

from . import legacy_route


def login_rate_limit():
    return current_app.config["LOGIN_RATE_LIMIT"]


@legacy_route("/auth/login", methods=["POST"])
@limiter.limit(login_rate_limit, methods=["POST"])
def login():
    data = json_body()

    user = authenticate(
        username=data.get("username"),
        password=data.get("password"),
    )

    token, csrf_token = issue_session_token(user)
    response = jsonify({
        "success": True,
        "user": normalize_user(user),
        "csrf_token": csrf_token,
    })
    return attach_session(response, token, csrf_token), 200


@legacy_route("/auth/check", methods=["GET"])
@with_viewer
def check_session(viewer):
    if viewer is None:
        return jsonify({"authenticated": False, "csrf_token": None}), 200

    return jsonify({
        "authenticated": True,
        "user": viewer.to_dict(),
        "csrf_token": get_jwt().get("csrf"),
    }), 200


@legacy_route("/auth/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True, "message": "Logged out successfully"})
    unset_jwt_cookies(response)
    return response, 200
