import logging
import os
import secrets
import time

from flask import current_app
from werkzeug.utils import secure_filename

from app.errors import ValidationError

logger = logging.getLogger(__name__)

UPLOAD_SUBFOLDERS = ("profile", "projects", "resume")

ALLOWED_MIMETYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/svg+xml",
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def upload_root():
    return os.path.abspath(current_app.config["UPLOAD_FOLDER"])


def ensure_upload_folders():
    root = upload_root()
    for folder in ("",) + UPLOAD_SUBFOLDERS:
        os.makedirs(os.path.join(root, folder), exist_ok=True)


def save_upload(file_storage, subfolder=""):
    """
    Store an uploaded file under ``UPLOAD_FOLDER/<subfolder>`` with a unique
    name and return ``(relative_path, public_url)``.
    """
    if file_storage is None or not file_storage.filename:
        raise ValidationError("No file uploaded", errors=[{"field": "file", "message": "Field required"}])

    subfolder = (subfolder or "").strip("/")
    if subfolder and subfolder not in UPLOAD_SUBFOLDERS:
        raise ValidationError(
            "Invalid upload path",
            errors=[{"field": "path", "message": f"Must be one of {', '.join(UPLOAD_SUBFOLDERS)}"}],
        )

    if file_storage.mimetype not in ALLOWED_MIMETYPES:
        raise ValidationError(
            "Invalid file type. Only images, PDFs, and Word documents are allowed.",
            errors=[{"field": "file", "message": f"Unsupported type {file_storage.mimetype}"}],
        )

    original = secure_filename(file_storage.filename)
    _, ext = os.path.splitext(original)
    stored_name = f"file-{int(time.time() * 1000)}-{secrets.token_hex(4)}{ext.lower()}"

    ensure_upload_folders()
    relative_path = f"{subfolder}/{stored_name}" if subfolder else stored_name
    file_storage.save(os.path.join(upload_root(), relative_path))

    base_url = current_app.config["BASE_URL"].rstrip("/")
    url = f"{base_url}/uploads/{relative_path}"
    logger.info(f"📁 Stored upload {original} as {relative_path}")
    return relative_path, url
