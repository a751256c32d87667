import re

from .exceptions import InvariantViolation

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50


def assert_username(username: str) -> None:
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise InvariantViolation(
            f"Username must be between {USERNAME_MIN_LENGTH} and "
            f"{USERNAME_MAX_LENGTH} characters",
            field="username",
        )

    if not USERNAME_PATTERN.match(username):
        raise InvariantViolation(
            "Username can only contain letters, numbers, and underscores",
            field="username",
        )


def assert_new_password(
    password: str, confirm: str, *, min_length: int, field: str = "new_password"
) -> None:
    if len(password) < min_length:
        raise InvariantViolation(
            f"Password must be at least {min_length} characters long",
            field=field,
        )

    if password != confirm:
        raise InvariantViolation("Passwords do not match", field="confirm_password")
