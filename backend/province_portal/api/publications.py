from flask import jsonify

from province_portal.application.content.registry import CIRCULARS, NEWSLINE

from . import legacy_route


@legacy_route("/circulars/archive", methods=["GET"])
def circulars_archive():
    return jsonify({"success": True, "archive": CIRCULARS.archive()}), 200


@legacy_route("/newsline/archive", methods=["GET"])
def newsline_archive():
    return jsonify({"success": True, "archive": NEWSLINE.archive()}), 200


@legacy_route("/newsline/current", methods=["GET"])
def newsline_current():
    issue = NEWSLINE.current()
    return jsonify({
        "success": True,
        "data": NEWSLINE.serialize(issue) if issue else None,
    }), 200
