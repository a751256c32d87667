from typing import Any, Dict, Optional

from province_portal.domain.identity import AuthenticatedUser
from province_portal.errors import ValidationError
from province_portal.extensions import db
from province_portal.models.setting import Setting
from province_portal.utils.audit import log_action
from province_portal.utils.transaction import transactional

SETTING_TYPES = {"text", "textarea", "image", "url", "number", "boolean", "json"}


def get_settings(key: Optional[str] = None) -> Dict[str, Any]:
    """``{key: value}`` for one key (value None when unset) or for all keys."""
    if key:
        setting = Setting.query.filter_by(key_name=key).first()
        return {key: setting.value if setting else None}

    return {
        setting.key_name: setting.value
        for setting in Setting.query.order_by(Setting.key_name.asc()).all()
    }


def upsert_setting(*, actor: AuthenticatedUser, data: Dict[str, Any]) -> Setting:
    key = data.get("key") or data.get("key_name")
    key = key.strip() if isinstance(key, str) else ""
    if not key:
        raise ValidationError("Setting key is required", field="key")

    value = data.get("value")
    if value is not None and not isinstance(value, str):
        value = str(value)

    setting_type = data.get("type") if data.get("type") in SETTING_TYPES else None

    setting = Setting.query.filter_by(key_name=key).first()
    created = setting is None

    with transactional():
        if created:
            setting = Setting()
            setting.key_name = key
            setting.type = setting_type or "text"
            db.session.add(setting)
        elif setting_type:
            setting.type = setting_type

        setting.value = value
        db.session.flush()

        log_action(
            actor=actor,
            action="setting.create" if created else "setting.update",
            entity_type="setting",
            entity_id=key,
            payload={"type": setting.type},
        )

    return setting
