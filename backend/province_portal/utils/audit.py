from typing import Any, Optional

from flask import has_request_context, request

from province_portal.domain.identity import AuthenticatedUser
from province_portal.extensions import db
from province_portal.models.audit_log import AuditLog


def log_action(
    *,
    actor: Optional[AuthenticatedUser],
    action: str,
    entity_type: str,
    entity_id: Optional[Any],
    payload: dict | None = None,
) -> AuditLog:
    """Stage an audit entry in the current session; it commits with the change it describes."""
    log = AuditLog()

    log.actor_id = actor.id if actor else None
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id) if entity_id is not None else None
    log.payload = payload or {}

    if has_request_context():
        log.ip_address = request.remote_addr
        log.user_agent = (request.user_agent.string or "")[:255]

    db.session.add(log)
    return log
