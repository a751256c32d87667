from flask import jsonify

from . import legacy_route


@legacy_route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200
