from province_portal.models.base import utc_now
from .record import normalize_value


def normalize_user(user, *, include_status=False):
    data = {
        "id": user.id,
        "username": user.username,
        "role": user.role,
    }

    if include_status:
        data.update({
            "last_login": normalize_value(user.last_login),
            "failed_attempts": user.failed_attempts,
            "is_locked": user.is_locked(utc_now()),
            "created_at": normalize_value(user.created_at),
        })

    return data
