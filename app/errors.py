"""Error kinds raised by services and routes, and their translation to JSON responses."""
import logging

from flask import jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, errors=None, code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors
        self.code = code

    def to_dict(self):
        body = {"message": self.message}
        if self.errors is not None:
            body["errors"] = self.errors
        if self.code is not None:
            body["code"] = self.code
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request data"


class AuthError(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Conflict"


class UpstreamError(ApiError):
    status_code = 500
    default_message = "Upstream service failed"

    def __init__(self, message=None, code="general_error"):
        super().__init__(message, code=code)


def field_errors(exc: PydanticValidationError):
    """Flatten pydantic errors to ``[{"field": "email", "message": "..."}]``."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        errors.append({"field": field, "message": error.get("msg", "Invalid value")})
    return errors


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"❌ {type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("❌ Unhandled error")
        return jsonify({"message": "Internal server error"}), 500
