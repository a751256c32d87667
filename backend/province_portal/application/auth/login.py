import logging
from datetime import datetime, timedelta
from typing import Optional

from flask import current_app
from werkzeug.security import check_password_hash, generate_password_hash

from province_portal.errors import AccountLocked, AuthenticationError, ValidationError
from province_portal.extensions import db
from province_portal.models.admin_user import AdminUser
from province_portal.models.base import utc_now
from province_portal.utils.audit import log_action
from province_portal.domain.identity import AuthenticatedUser

logger = logging.getLogger(__name__)

_dummy_hash: Optional[str] = None


def _burn_password_check(password: str) -> None:
    """Spend the same hashing work for unknown usernames as for real ones."""
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = generate_password_hash(
            "not-a-real-password",
            method=current_app.config.get("PASSWORD_HASH_METHOD", "scrypt"),
        )
    check_password_hash(_dummy_hash, password)


def authenticate(
    *,
    username: Optional[str],
    password: Optional[str],
    now: Optional[datetime] = None,
) -> AdminUser:
    """
    Verify credentials and maintain the lockout counters.

    Active -> Locked after MAX_LOGIN_ATTEMPTS consecutive failures; the lock
    expires on its own after LOCKOUT_DURATION. A successful login resets both.
    """
    now = now or utc_now()
    username = username.strip() if isinstance(username, str) else ""

    if not username or not isinstance(password, str) or not password:
        raise ValidationError("Username and password required")

    user = AdminUser.query.filter_by(username=username).first()
    if user is None:
        _burn_password_check(password)
        logger.warning("Failed login for unknown username %r", username)
        raise AuthenticationError("Invalid credentials")

    if user.is_locked(now):
        logger.warning("Login attempt on locked account %s", user.username)
        raise AccountLocked("Account locked. Please try again later.")

    if not user.check_password(password):
        _record_failure(user, now)
        raise AuthenticationError("Invalid credentials")

    user.failed_attempts = 0
    user.locked_until = None
    user.last_login = now
    log_action(
        actor=AuthenticatedUser.from_user(user),
        action="auth.login",
        entity_type="admin_user",
        entity_id=user.id,
    )
    db.session.commit()

    logger.info("User %s logged in", user.username)
    return user


def _record_failure(user: AdminUser, now: datetime) -> None:
    config = current_app.config
    user.failed_attempts = (user.failed_attempts or 0) + 1

    if user.failed_attempts >= config["MAX_LOGIN_ATTEMPTS"]:
        user.locked_until = now + timedelta(seconds=config["LOCKOUT_DURATION"])
        logger.warning(
            "Account %s locked until %s after %d failed attempts",
            user.username, user.locked_until.isoformat(), user.failed_attempts,
        )
    else:
        logger.warning(
            "Failed login for %s (%d attempts)", user.username, user.failed_attempts
        )

    db.session.commit()
