from flask import Blueprint, jsonify
from flask_login import current_user, login_required

from app.routes.crud import request_json
from app.schemas import LoginSchema, validate
from app.services.auth import AuthService
import app.databases as databases

auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.route("/login", methods=["POST"])
def login():
    data = validate(LoginSchema, request_json(), "login")
    user = AuthService.login(data.username, data.password)
    return jsonify(databases.user_to_dict(user)), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    AuthService.logout()
    return jsonify({"message": "Logged out successfully"}), 200


@auth_bp.route("/user", methods=["GET"])
@login_required
def get_current_user():
    return jsonify(databases.user_to_dict(current_user))
