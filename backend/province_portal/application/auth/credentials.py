from typing import Any, Dict

from flask import current_app

from province_portal.domain.identity import AuthenticatedUser
from province_portal.domain.invariants.credentials import assert_new_password, assert_username
from province_portal.errors import NotFound, ValidationError
from province_portal.models.admin_user import AdminUser
from province_portal.utils.audit import log_action
from province_portal.utils.transaction import transactional


def username_taken(username: str, *, exclude_id=None) -> bool:
    query = AdminUser.query.filter(AdminUser.username == username)
    if exclude_id is not None:
        query = query.filter(AdminUser.id != exclude_id)
    return query.first() is not None


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value.strip() if isinstance(value, str) else ""


def password_field(data: Dict[str, Any], key: str) -> str:
    """Password values are taken verbatim; anything but a string is rejected."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(
            f"{key.replace('_', ' ').capitalize()} must be a string", field=key
        )
    return value


def update_credentials(*, actor: AuthenticatedUser, data: Dict[str, Any]) -> AdminUser:
    """
    Change the signed-in user's username and/or password.

    The two changes are independent and may be combined; a password change
    needs the correct current password. Nothing is written unless every
    requested change is valid.
    """
    user = AdminUser.query.filter_by(id=actor.id).first()
    if user is None:
        raise NotFound("User not found")

    new_username = _text(data, "username")
    new_password = password_field(data, "new_password")
    current_password = password_field(data, "current_password")
    confirm_password = password_field(data, "confirm_password")

    changes: list[str] = []

    if new_username and new_username != user.username:
        assert_username(new_username)
        if username_taken(new_username, exclude_id=user.id):
            raise ValidationError("Username already exists", field="username")
        changes.append("username")

    if new_password:
        if not current_password:
            raise ValidationError(
                "Current password is required to change password", field="current_password"
            )
        if not user.check_password(current_password):
            raise ValidationError("Current password is incorrect", field="current_password")

        assert_new_password(
            new_password,
            confirm_password,
            min_length=current_app.config["MIN_PASSWORD_LENGTH"],
        )
        if user.check_password(new_password):
            raise ValidationError(
                "New password must be different from current password", field="new_password"
            )
        changes.append("password")

    if not changes:
        raise ValidationError("No changes provided")

    with transactional():
        if "username" in changes:
            user.username = new_username
        if "password" in changes:
            user.set_password(new_password)

        log_action(
            actor=actor,
            action="admin_user.update_credentials",
            entity_type="admin_user",
            entity_id=user.id,
            payload={"changes": changes},
        )

    current_app.logger.info("Credentials updated for user %s: %s", user.id, ", ".join(changes))
    return user
