# edgeblog/errors.py
"""
Errores de la API.

Los servicios lanzan subclases de APIError; el manejador registrado en
create_app() las convierte en {"message": ...} con su código HTTP.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    status_code = 500
    message = "Internal server error."

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ValidationError(APIError):
    status_code = 400
    message = "Invalid request."


class InvalidCredentials(APIError):
    status_code = 400
    message = "Invalid credentials."


class Unauthorized(APIError):
    status_code = 401
    message = "Not authorized."


class NotFound(APIError):
    status_code = 404
    message = "Resource not found."


class Conflict(APIError):
    status_code = 409
    message = "Resource already exists."


class InternalConfigError(APIError):
    status_code = 500
    message = "Server configuration error."


class UpstreamFailure(APIError):
    status_code = 500
    message = "Server error. Please try again later."


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error: %s", error)
        return jsonify({"message": "Internal server error."}), 500
