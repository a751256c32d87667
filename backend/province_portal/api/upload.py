from flask import jsonify, request

from province_portal.utils.audit import log_action
from province_portal.utils.decorators import admin_required
from province_portal.utils.media import save_image
from province_portal.utils.transaction import transactional

from . import legacy_route


@legacy_route("/upload/image", methods=["POST"])
@admin_required
def upload_image(actor):
    url, filename = save_image(request.files.get("image"))

    with transactional():
        log_action(
            actor=actor,
            action="upload.image",
            entity_type="upload",
            entity_id=filename,
            payload={"url": url},
        )

    return jsonify({"success": True, "url": url, "filename": filename}), 200
