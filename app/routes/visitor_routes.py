# app/routes/visitor_routes.py
from flask import Blueprint, jsonify

from app.services import reading_rewards, visitor_service

visitor_bp = Blueprint("visitor", __name__, url_prefix="/api")


@visitor_bp.route("/visitor-stats", methods=["GET"])
def visitor_stats():
    return jsonify(visitor_service.get_visitor_stats())


@visitor_bp.route("/track-visitor", methods=["POST"])
def track_visitor():
    # reuse the cookie token, or hand out a new one
    visitor_id = visitor_service.get_visitor_id()
    is_new_cookie = visitor_id is None
    if is_new_cookie:
        visitor_id = visitor_service.new_visitor_id()

    result = visitor_service.track_visitor(visitor_id)

    response = jsonify(result)
    if is_new_cookie:
        visitor_service.set_visitor_cookie(response, visitor_id)
    return response


@visitor_bp.route("/rewards", methods=["GET"])
def reward_summary():
    return jsonify(reading_rewards.summary(visitor_service.get_visitor_id()))
