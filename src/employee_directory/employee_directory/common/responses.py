from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AdminRequiredError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateNameError,
    DuplicateUsernameError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    StorageError,
    ValidationError,
)

LOGGER = logging.getLogger(__name__)

# (status, error code); looked up along the exception's MRO so subclasses map first.
ERROR_STATUS = {
    ValidationError: (400, "ValidationError"),
    DuplicateNameError: (409, "DuplicateName"),
    DuplicateUsernameError: (409, "DuplicateUsername"),
    NotFoundError: (404, "NotFound"),
    InvalidCredentialsError: (401, "InvalidCredentials"),
    MissingTokenError: (401, "MissingToken"),
    ExpiredTokenError: (403, "ExpiredToken"),
    InvalidTokenError: (403, "InvalidToken"),
    AdminRequiredError: (403, "AdminRequired"),
    StorageError: (500, "StorageError"),
    AuthenticationError: (401, "AuthenticationError"),
    AuthorizationError: (403, "AuthorizationError"),
}


def status_for(error: DomainError) -> tuple[int, str]:
    for klass in type(error).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return 400, type(error).__name__


def error_body(error: DomainError) -> dict:
    _, code = status_for(error)
    body = {"message": str(error), "error": code}
    if isinstance(error, ValidationError) and error.fields:
        body["fields"] = error.fields
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status, _ = status_for(error)
        return jsonify(error_body(error)), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"message": error.description, "error": error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        LOGGER.exception("Unhandled error")
        if app.config.get("DEBUG", False):
            return jsonify({"message": f"Internal error: {error}", "error": "InternalError"}), 500
        return jsonify({"message": "Internal server error", "error": "InternalError"}), 500
