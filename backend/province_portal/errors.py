import logging
import traceback
from typing import Optional

from flask import current_app, jsonify
from flask_jwt_extended.exceptions import CSRFError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from province_portal.domain.invariants.exceptions import InvariantViolation
from province_portal.extensions import db

logger = logging.getLogger(__name__)

HTTP_MESSAGES = {
    400: "Bad request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not found",
    405: "Method not allowed",
    413: "Uploaded file is too large",
    429: "Too many requests. Please try again later.",
}


class ApiError(Exception):
    """Base class for errors rendered as ``{"success": false, "error": ...}``."""

    status_code = 400

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        body = {"success": False, "error": self.message}
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(ApiError):
    status_code = 400


class AuthenticationError(ApiError):
    status_code = 401


class PermissionDenied(ApiError):
    # Wrong role is reported exactly like a missing session.
    status_code = 401


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    status_code = 409


class AccountLocked(ApiError):
    status_code = 423


def error_response(error: str, status: int, **extra):
    body = {"success": False, "error": error}
    body.update(extra)
    response = jsonify(body)
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        extra = {"field": error.field} if error.field else {}
        return error_response(str(error), 400, **extra)

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        logger.warning("CSRF validation failed: %s", error)
        return error_response("Invalid CSRF token", 403)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        logger.warning("Integrity error: %s", error.orig)
        return error_response("Conflicts with an existing record", 409)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        status = error.code or 500
        response = error_response(HTTP_MESSAGES.get(status, error.name), status)
        if status == 429:
            logger.warning("Rate limit exceeded: %s", error.description)
            response.headers.setdefault("Retry-After", "900")
        if status == 405 and error.valid_methods:
            response.headers["Allow"] = ", ".join(error.valid_methods)
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled exception")
        db.session.rollback()

        extra = {}
        if current_app.config.get("EXPOSE_ERROR_DETAILS"):
            extra["message"] = str(error)
            extra["trace"] = traceback.format_exc()

        return error_response("Internal server error", 500, **extra)
