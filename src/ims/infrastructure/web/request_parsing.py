"""Helpers for pulling typed fields out of JSON request bodies."""

from __future__ import annotations

from typing import Any

from flask import request

from ims.infrastructure.web.errors import MalformedRequestError


def json_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise MalformedRequestError()
    return body


def string_field(body: dict[str, Any], name: str) -> str:
    value = body.get(name)
    if not isinstance(value, str):
        raise MalformedRequestError()
    return value


def integer_field(body: dict[str, Any], name: str) -> int:
    value = body.get(name)
    # bool is an int subclass; JSON true/false is not a quantity.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRequestError()
    return value


def number_field(body: dict[str, Any], name: str) -> int | float:
    value = body.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedRequestError()
    return value
