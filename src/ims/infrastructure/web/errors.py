"""Mapping from exceptions to JSON error responses.

Expected failures (validation, not found, stock, credentials) are
surfaced with their message. Infrastructure failures and anything
unclassified get a fixed 500 message; the detail only goes to the log.
"""

from __future__ import annotations

import structlog
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ims.domain.exceptions import (
    AuthenticationError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


class MalformedRequestError(Exception):
    """The request body is not the JSON object the endpoint expects."""

    def __init__(self, message: str = "Invalid request body") -> None:
        super().__init__(message)


_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (EntityNotFoundError, 404),
    (ValidationError, 400),
    (InsufficientStockError, 400),
    (AuthenticationError, 401),
]


def status_for(exc: DomainException) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(MalformedRequestError)
    def handle_malformed_request(exc: MalformedRequestError):
        return error_response(str(exc), 400)

    @app.errorhandler(DomainException)
    def handle_domain_error(exc: DomainException):
        status = status_for(exc)
        if status == 500:
            logger.error("request_failed", error=type(exc).__name__, detail=str(exc))
            return error_response(INTERNAL_ERROR_MESSAGE, 500)
        return error_response(str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return error_response(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.exception("unhandled_error")
        return error_response(INTERNAL_ERROR_MESSAGE, 500)
