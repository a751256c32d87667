from typing import Any, Dict, List

from flask import current_app

from province_portal.domain.identity import AuthenticatedUser
from province_portal.domain.invariants.credentials import assert_new_password, assert_username
from province_portal.errors import ValidationError
from province_portal.extensions import db
from province_portal.models.admin_user import ROLES, AdminUser
from province_portal.utils.audit import log_action
from province_portal.utils.transaction import transactional

from .credentials import password_field, username_taken


def create_user(*, actor: AuthenticatedUser, data: Dict[str, Any]) -> AdminUser:
    username = data.get("username").strip() if isinstance(data.get("username"), str) else ""
    password = password_field(data, "password")
    confirm = password_field(data, "confirm_password")
    role = data.get("role") if data.get("role") in ROLES else "admin"

    if not username:
        raise ValidationError("Username is required", field="username")
    if not password:
        raise ValidationError("Password is required", field="password")

    assert_username(username)
    if username_taken(username):
        raise ValidationError("Username already exists", field="username")

    assert_new_password(
        password,
        confirm,
        min_length=current_app.config["MIN_PASSWORD_LENGTH"],
        field="password",
    )

    user = AdminUser()
    user.username = username
    user.role = role
    user.set_password(password)

    with transactional():
        db.session.add(user)
        db.session.flush()

        log_action(
            actor=actor,
            action="admin_user.create",
            entity_type="admin_user",
            entity_id=user.id,
            payload={"username": username, "role": role},
        )

    return user


def list_users() -> List[AdminUser]:
    return AdminUser.query.order_by(AdminUser.created_at.desc(), AdminUser.id.desc()).all()
