# app/routes/profile_routes.py
from datetime import datetime

from flask import Blueprint, jsonify
from flask_login import login_required

from app.errors import NotFoundError
from app.models import Profile, Resume
from app.routes.crud import merged_payload, request_json
from app.schemas import ProfileSchema, ResumeSchema, validate
import app.databases as databases

profile_bp = Blueprint("profile", __name__, url_prefix="/api")


@profile_bp.route("/profile", methods=["GET"])
def get_profile():
    profile = databases.get_profile()
    if profile is None:
        raise NotFoundError("Profile not found")
    return jsonify(databases.profile_to_dict(profile))


@profile_bp.route("/profile", methods=["POST", "PATCH"])
@login_required
def save_profile():
    """Profile is a singleton: both verbs update the first row or create it."""
    body = request_json()
    existing = databases.get_profile()
    if existing is not None:
        body = merged_payload(databases.profile_to_dict(existing), body, ProfileSchema)

    data = validate(ProfileSchema, body, "profile")
    profile = databases.upsert_singleton(Profile, data.model_dump())
    return jsonify(databases.profile_to_dict(profile)), 201 if existing is None else 200


@profile_bp.route("/resume", methods=["GET"])
def get_resume():
    resume = databases.get_resume()
    if resume is None:
        raise NotFoundError("Resume not found")
    return jsonify(databases.resume_to_dict(resume))


@profile_bp.route("/resume", methods=["POST"])
@login_required
def save_resume():
    data = validate(ResumeSchema, request_json(), "resume")
    values = data.model_dump()
    values["uploaded_at"] = values.get("uploaded_at") or datetime.utcnow()
    resume = databases.upsert_singleton(Resume, values)
    return jsonify(databases.resume_to_dict(resume)), 200
