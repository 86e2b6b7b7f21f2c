"""API error types and the JSON error handlers registered by the app factory."""
from flask import jsonify
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from .extensions import db


class APIError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(APIError):
    status_code = 400
    default_message = "Invalid data"


class AuthenticationError(APIError):
    status_code = 401
    default_message = "Not authenticated"


class NotFoundError(APIError):
    status_code = 404
    default_message = "Not found"


class ConflictError(APIError):
    status_code = 409
    default_message = "Conflict"


def describe_validation_error(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors(include_url=False):
        msg = err.get("msg", "Invalid value")
        # pydantic prefixes messages raised from our own validators
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return ", ".join(parts) or "Invalid data"


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def _api_error(exc):
        return jsonify({"error": exc.message}), exc.status_code

    @app.errorhandler(PydanticValidationError)
    def _schema_error(exc):
        return jsonify({"error": describe_validation_error(exc)}), 400

    @app.errorhandler(HTTPException)
    def _http_error(exc):
        return jsonify({"error": exc.description or exc.name}), exc.code

    @app.errorhandler(Exception)
    def _unhandled(exc):
        db.session.rollback()
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": "Internal server error"}), 500
