"""Protected product and inventory endpoints under ``/api``."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from ims.application.dto import ProductDTO
from ims.application.inventory_service import InventoryService
from ims.infrastructure.web.auth_routes import require_bearer_token
from ims.infrastructure.web.request_parsing import (
    integer_field,
    json_body,
    number_field,
    string_field,
)

api = Blueprint("api", __name__, url_prefix="/api")
api.before_request(require_bearer_token)


def _inventory() -> InventoryService:
    return current_app.extensions["ims"].inventory_service


def _product_json(product):
    return ProductDTO.from_product(product).to_dict()


@api.route("/products", methods=["POST"])
def add_product():
    body = json_body()
    product = _inventory().add_product(
        name=string_field(body, "name"),
        price=number_field(body, "price"),
        quantity=integer_field(body, "quantity"),
    )
    return jsonify(_product_json(product)), 201


@api.route("/products", methods=["GET"])
def list_products():
    return jsonify([_product_json(p) for p in _inventory().get_all_products()])


@api.route("/products/<product_id>", methods=["GET"])
def get_product(product_id: str):
    return jsonify(_product_json(_inventory().get_product(product_id)))


@api.route("/products/<product_id>/sell", methods=["POST"])
def sell_product_units(product_id: str):
    quantity = integer_field(json_body(), "quantity")
    product = _inventory().sell_product_units(product_id, quantity)
    return jsonify(_product_json(product))


@api.route("/products/<product_id>/restock", methods=["POST"])
def restock_product(product_id: str):
    quantity = integer_field(json_body(), "quantity")
    product = _inventory().restock_product(product_id, quantity)
    return jsonify(_product_json(product))


@api.route("/products/<product_id>/price", methods=["PUT"])
def update_product_price(product_id: str):
    price = number_field(json_body(), "price")
    _inventory().update_product_price(product_id, price)
    return jsonify({"message": "product price updated successfully"})


@api.route("/products/<product_id>", methods=["DELETE"])
def delete_product(product_id: str):
    _inventory().delete_product(product_id)
    return jsonify({"message": "product deleted successfully"})


@api.route("/inventory/value", methods=["GET"])
def inventory_value():
    value = _inventory().get_inventory_value()
    return jsonify({"inventory_value": float(value)})
