# province_portal/api/content.py
"""
List/get/create/update/delete routes generated for every content resource.

Reads are public (admins additionally see hidden rows); writes need an admin
session and the CSRF header.
"""
from flask import jsonify, request

from province_portal.application.content.registry import RESOURCES
from province_portal.application.content.service import (
    create_record,
    delete_record,
    get_record,
    list_records,
    parse_record_id,
    update_record,
)
from province_portal.models.base import utc_now
from province_portal.normalizers.pagination import normalize_pagination
from province_portal.utils.decorators import admin_required, with_viewer

from . import legacy_route


def _request_id(body=None):
    raw = request.args.get("id")
    if raw is None and isinstance(body, dict):
        raw = body.get("id")
    return parse_record_id(raw)


def register_resource_routes(resource):
    name = resource.name

    @with_viewer
    def list_view(viewer):
        now = utc_now()
        items, page = list_records(resource, viewer=viewer, args=request.args, now=now)

        body = normalize_pagination(items, resource.serialize, page=page)
        body.update(resource.list_extras(viewer=viewer, now=now))
        return jsonify(body), 200

    @with_viewer
    def get_view(viewer):
        entity = get_record(resource, viewer=viewer, args=request.args)
        return jsonify({"success": True, "data": resource.serialize(entity)}), 200

    @admin_required
    def create_view(actor):
        entity = create_record(resource, actor=actor, data=request.get_json(silent=True))

        body = {
            "success": True,
            "id": entity.id,
            "message": f"{resource.label} created successfully",
            "data": resource.serialize(entity),
        }
        if resource.slugged:
            body["slug"] = entity.slug
        return jsonify(body), 200

    @admin_required
    def update_view(actor):
        data = request.get_json(silent=True)
        entity = update_record(
            resource,
            actor=actor,
            record_id=_request_id(data),
            data=data,
        )
        return jsonify({
            "success": True,
            "message": f"{resource.label} updated successfully",
            "data": resource.serialize(entity),
        }), 200

    @admin_required
    def delete_view(actor):
        delete_record(resource, actor=actor, record_id=_request_id(request.get_json(silent=True)))
        return jsonify({
            "success": True,
            "message": f"{resource.label} deleted successfully",
        }), 200

    legacy_route(f"/{name}/list", endpoint=f"{name}_list", methods=["GET"])(list_view)
    legacy_route(f"/{name}/get", endpoint=f"{name}_get", methods=["GET"])(get_view)
    legacy_route(f"/{name}/create", endpoint=f"{name}_create", methods=["POST"])(create_view)
    legacy_route(
        f"/{name}/update", endpoint=f"{name}_update", methods=["PUT", "PATCH"]
    )(update_view)
    legacy_route(f"/{name}/delete", endpoint=f"{name}_delete", methods=["DELETE"])(delete_view)


for _resource in RESOURCES.values():
    register_resource_routes(_resource)
