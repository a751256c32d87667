import logging
from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from province_portal.domain.identity import AuthenticatedUser
from province_portal.errors import PermissionDenied

logger = logging.getLogger(__name__)


def current_viewer():
    """Return the signed-in user for public reads, or ``None`` for anonymous callers."""
    try:
        if verify_jwt_in_request(optional=True) is None:
            return None
    except (JWTExtendedException, PyJWTError) as exc:
        logger.debug("Treating request as anonymous: %s", exc)
        return None

    user = get_current_user()
    return AuthenticatedUser.from_user(user) if user is not None else None


def roles_required(*allowed_roles):
    """Require a valid session (and CSRF token on writes); inject it as ``actor``."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            actor = AuthenticatedUser.from_user(get_current_user())

            if actor.role not in allowed_roles:
                logger.warning(
                    "User %s with role %s denied access to %s",
                    actor.username, actor.role, fn.__name__,
                )
                raise PermissionDenied("Unauthorized")

            return fn(*args, actor=actor, **kwargs)
        return wrapper
    return decorator


admin_required = roles_required("admin")


def with_viewer(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        return fn(*args, viewer=current_viewer(), **kwargs)
    return wrapper
