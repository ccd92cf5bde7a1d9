"""Session endpoints and the bearer-token guard for protected routes."""

from __future__ import annotations

from flask import Blueprint, current_app, g, jsonify, request

from ims.domain.exceptions import UnauthorizedError
from ims.infrastructure.web.request_parsing import json_body, string_field

auth = Blueprint("auth", __name__)


@auth.route("/login", methods=["POST"])
def login():
    body = json_body()
    email = string_field(body, "email")
    password = string_field(body, "password")

    token = current_app.extensions["ims"].auth_service.login(email, password)
    return jsonify({"token": token})


@auth.route("/logout", methods=["POST"])
def logout():
    # Tokens are stateless; the client simply discards its copy.
    return jsonify({"message": "logout successful"})


def require_bearer_token() -> None:
    """``before_request`` hook: reject the request unless it carries a valid token."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise UnauthorizedError("unauthorized")

    token_generator = current_app.extensions["ims"].token_generator
    g.manager_id = token_generator.verify_token(token.strip())
