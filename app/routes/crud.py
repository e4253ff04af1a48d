# app/routes/crud.py
from flask import Blueprint, request, jsonify
from flask_login import login_required

import app.databases as databases
from app.errors import ValidationError
from app.schemas import validate


def request_json():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def merged_payload(current, changes, schema):
    """
    PATCH bodies are applied on top of the stored record, then validated whole.
    Stored records are camelCase, so snake_case keys are renamed to their alias first.
    """
    payload = dict(current)
    for key, value in changes.items():
        field = schema.model_fields.get(key)
        if field is not None and field.alias:
            key = field.alias
        payload[key] = value
    return payload


def crud_blueprint(name, url_prefix, model, schema, serializer, label, order_by=()):
    """
    Blueprint with the uniform collection contract:
    list / get / create / update / delete, writes behind login.
    """
    bp = Blueprint(name, __name__, url_prefix=url_prefix)

    @bp.route("", methods=["GET"])
    def list_items():
        items = databases.list_all(model, *order_by)
        return jsonify([serializer(item) for item in items])

    @bp.route("/<int:item_id>", methods=["GET"])
    def get_item(item_id):
        item = databases.get_or_404(model, item_id, label.capitalize())
        return jsonify(serializer(item))

    @bp.route("", methods=["POST"])
    @login_required
    def create_item():
        data = validate(schema, request_json(), label)
        item = databases.create(model, data.model_dump())
        return jsonify(serializer(item)), 201

    @bp.route("/<int:item_id>", methods=["PATCH"])
    @login_required
    def update_item(item_id):
        item = databases.get_or_404(model, item_id, label.capitalize())
        data = validate(schema, merged_payload(serializer(item), request_json(), schema), label)
        item = databases.update(model, item_id, data.model_dump(), label.capitalize())
        return jsonify(serializer(item))

    @bp.route("/<int:item_id>", methods=["DELETE"])
    @login_required
    def delete_item(item_id):
        databases.delete(model, item_id, label.capitalize())
        return jsonify({"message": f"{label.capitalize()} deleted successfully"}), 200

    return bp
