from flask import jsonify

from province_portal.application.content.registry import GALLERY, PROVINCIALS, STRENNA
from province_portal.models.provincial import Provincial
from province_portal.models.strenna import Strenna

from . import legacy_route


@legacy_route("/provincials/current", methods=["GET"])
def current_provincial():
    provincial = (
        Provincial.query.filter(
            Provincial.title == "provincial",
            Provincial.is_current.is_(True),
        )
        .order_by(Provincial.created_at.desc(), Provincial.id.desc())
        .first()
    )
    return jsonify({
        "success": True,
        "data": PROVINCIALS.serialize(provincial) if provincial else None,
    }), 200


@legacy_route("/gallery/categories", methods=["GET"])
def gallery_categories():
    return jsonify({"success": True, "data": GALLERY.categories()}), 200


@legacy_route("/strenna/current", methods=["GET"])
def current_strenna():
    strenna = (
        Strenna.query.filter(Strenna.is_active.is_(True))
        .order_by(Strenna.year.desc(), Strenna.created_at.desc())
        .first()
    )
    return jsonify({
        "success": True,
        "data": STRENNA.serialize(strenna) if strenna else None,
    }), 200
