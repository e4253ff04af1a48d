# app/routes/contact_routes.py
import logging

from flask import Blueprint, jsonify
from flask_login import login_required

from app.models import Contact, Feedback
from app.routes.crud import request_json
from app.schemas import ContactSchema, FeedbackSchema, validate
import app.databases as databases

logger = logging.getLogger(__name__)

contact_bp = Blueprint("contact", __name__, url_prefix="/api")


@contact_bp.route("/contact", methods=["POST"])
def submit_contact():
    data = validate(ContactSchema, request_json(), "contact form")
    contact = databases.create(Contact, data.model_dump())
    logger.info(f"✉️ New message #{contact.id} from {contact.email}")
    return jsonify({"message": "Message sent successfully"}), 201


@contact_bp.route("/contact", methods=["GET"])
@login_required
def list_contacts():
    messages = databases.list_all(Contact, Contact.created_at.desc(), Contact.id.desc())
    return jsonify([databases.contact_to_dict(m) for m in messages])


@contact_bp.route("/feedback", methods=["POST"])
def submit_feedback():
    data = validate(FeedbackSchema, request_json(), "feedback")
    databases.create(Feedback, data.model_dump())
    return jsonify({"message": "Feedback submitted successfully"}), 201


@contact_bp.route("/feedback", methods=["GET"])
@login_required
def list_feedback():
    feedback = databases.list_all(Feedback, Feedback.created_at.desc(), Feedback.id.desc())
    return jsonify([databases.feedback_to_dict(f) for f in feedback])


# Dashboard stats (for admin dashboard)
@contact_bp.route("/stats", methods=["GET"])
@login_required
def dashboard_stats():
    return jsonify(databases.dashboard_stats())
