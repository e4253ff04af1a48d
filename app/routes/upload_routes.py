# app/routes/upload_routes.py
from datetime import datetime

from flask import Blueprint, request, jsonify, send_from_directory
from flask_login import login_required

from app.models import Resume
from app.services.uploads import save_upload, upload_root
import app.databases as databases

upload_bp = Blueprint("upload", __name__)


@upload_bp.route("/api/upload", methods=["POST"])
@login_required
def upload_file():
    file = request.files.get("file")
    subfolder = request.form.get("path", "").strip("/")

    relative_path, url = save_upload(file, subfolder)

    # resume uploads replace the current resume
    if subfolder == "resume":
        databases.upsert_singleton(Resume, {
            "filename": file.filename,
            "url": url,
            "uploaded_at": datetime.utcnow(),
        })

    return jsonify({
        "message": "File uploaded successfully",
        "filename": file.filename,
        "path": relative_path,
        "url": url,
    }), 200


@upload_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(upload_root(), filename)
