from flask import jsonify

from province_portal.application.dashboard import dashboard_stats
from province_portal.utils.decorators import admin_required

from . import legacy_route


@legacy_route("/dashboard/stats", methods=["GET"])
@admin_required
def stats(actor):
    return jsonify({"success": True, "data": dashboard_stats()}), 200
