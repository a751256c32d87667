from flask import jsonify, request

from province_portal.application.auth.credentials import update_credentials
from province_portal.application.auth.users import create_user, list_users
from province_portal.models.audit_log import AuditLog
from province_portal.normalizers.audit import normalize_audit_log
from province_portal.normalizers.pagination import normalize_pagination
from province_portal.normalizers.user import normalize_user
from province_portal.utils.decorators import admin_required
from province_portal.utils.pagination import apply_cursor, paginate_cursor
from province_portal.utils.request_body import json_body

from . import legacy_route


@legacy_route("/admin/update-credentials", methods=["POST", "PUT"])
@admin_required
def update_own_credentials(actor):
    user = update_credentials(actor=actor, data=json_body())
    return jsonify({
        "success": True,
        "message": "Credentials updated successfully",
        "user": normalize_user(user),
    }), 200


@legacy_route("/admin/create-user", methods=["POST"])
@admin_required
def create_admin_user(actor):
    user = create_user(actor=actor, data=json_body())
    return jsonify({
        "success": True,
        "message": "User created successfully",
        "user": normalize_user(user),
    }), 201


@legacy_route("/admin/list-users", methods=["GET"])
@admin_required
def list_admin_users(actor):
    return jsonify({
        "success": True,
        "users": [normalize_user(u, include_status=True) for u in list_users()],
    }), 200


@legacy_route("/admin/audit-logs", methods=["GET"])
@admin_required
def list_audit_logs(actor):
    limit = min(max(request.args.get("limit", 20, type=int), 1), 100)

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    query = apply_cursor(query, model=AuditLog, cursor=request.args.get("cursor"))
    logs, meta = paginate_cursor(query, model=AuditLog, limit=limit)

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
