from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first: InvalidTokenError is also an AuthenticationError.
STATUS_BY_ERROR = (
    (InvalidTokenError, 403),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
)


def status_for(error: DomainError) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), status_for(e)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return jsonify({"error": f"Internal server error: {e}"}), 500
        return jsonify({"error": "Internal server error"}), 500
