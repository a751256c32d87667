import os
import re
import uuid
from typing import Optional

from flask import current_app
from werkzeug.utils import secure_filename

from province_portal.errors import ValidationError

IMAGE_URL_PREFIX = "/uploads/images"
_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


def allowed_file(filename):
    allowed = current_app.config["ALLOWED_IMAGE_EXTENSIONS"]
    return "." in filename and filename.rsplit(".", 1)[1].lower() in allowed


def _file_size(file) -> int:
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def save_image(file):
    """Store an uploaded image under a random name. Returns ``(url, filename)``."""
    if file is None or not file.filename:
        raise ValidationError("No file uploaded", field="image")

    filename = secure_filename(file.filename)
    if not filename or not allowed_file(filename):
        raise ValidationError(
            "Invalid file type. Allowed: jpg, jpeg, png, gif, webp", field="image"
        )

    max_size = current_app.config["MAX_UPLOAD_SIZE"]
    if _file_size(file) > max_size:
        raise ValidationError(
            f"File too large. Maximum size is {max_size // (1024 * 1024)}MB",
            field="image",
        )

    ext = filename.rsplit(".", 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    upload_folder = os.path.join(current_app.config["UPLOAD_FOLDER"], "images")
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, unique_filename))

    current_app.logger.info("Stored upload %s as %s", filename, unique_filename)
    return f"{IMAGE_URL_PREFIX}/{unique_filename}", unique_filename


def media_url(value: Optional[str]) -> Optional[str]:
    """Public URL for a stored image reference (bare filename, uploads path or absolute URL)."""
    if not value:
        return value

    if _ABSOLUTE_URL.match(value) or value.startswith("/"):
        return value

    if value.startswith("uploads/"):
        return f"/{value}"

    return f"{IMAGE_URL_PREFIX}/{value}"
