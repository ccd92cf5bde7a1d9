"""Flask application factory."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask

from ims.application.auth_service import AuthService
from ims.application.inventory_service import InventoryService
from ims.domain.ports.token_generator import TokenGenerator
from ims.infrastructure.web.auth_routes import auth
from ims.infrastructure.web.errors import register_error_handlers
from ims.infrastructure.web.product_routes import api


@dataclass(frozen=True)
class WebServices:
    """What request handlers reach through ``current_app.extensions["ims"]``."""

    inventory_service: InventoryService
    auth_service: AuthService
    token_generator: TokenGenerator


def create_app(
    inventory_service: InventoryService,
    auth_service: AuthService,
    token_generator: TokenGenerator,
) -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["ims"] = WebServices(
        inventory_service=inventory_service,
        auth_service=auth_service,
        token_generator=token_generator,
    )

    app.register_blueprint(auth)
    app.register_blueprint(api)
    register_error_handlers(app)
    return app
