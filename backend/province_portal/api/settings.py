from flask import jsonify, request

from province_portal.application.settings import get_settings, upsert_setting
from province_portal.utils.decorators import admin_required
from province_portal.utils.request_body import json_body

from . import legacy_route


@legacy_route("/settings/get", methods=["GET"])
def read_settings():
    key = (request.args.get("key") or "").strip() or None
    return jsonify({"success": True, "data": get_settings(key)}), 200


@legacy_route("/settings/update", methods=["POST", "PUT"])
@admin_required
def update_setting(actor):
    data = json_body()
    if "key" not in data and request.args.get("key"):
        data["key"] = request.args["key"]

    setting = upsert_setting(actor=actor, data=data)
    return jsonify({
        "success": True,
        "message": "Setting updated successfully",
        "data": {"key_name": setting.key_name, "value": setting.value, "type": setting.type},
    }), 200
