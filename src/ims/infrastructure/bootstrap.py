"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from sqlalchemy import Engine

from ims.application.auth_service import AuthService
from ims.application.inventory_service import InventoryService
from ims.config import Settings
from ims.domain.model.manager import Manager
from ims.infrastructure.auth.jwt_token_generator import JWTTokenGenerator
from ims.infrastructure.notifier.log_notifier import LogNotifier
from ims.infrastructure.persistence.database import build_engine, create_schema
from ims.infrastructure.persistence.sql_manager_repository import SqlManagerRepository
from ims.infrastructure.persistence.sql_product_repository import SqlProductRepository

logger = structlog.get_logger(__name__)


@dataclass
class Container:
    """Everything a front end (HTTP or CLI) needs, built once per process."""

    settings: Settings
    engine: Engine
    inventory_service: InventoryService
    auth_service: AuthService
    token_generator: JWTTokenGenerator


def build_container(settings: Settings) -> Container:
    if settings.jwt_secret_generated:
        logger.warning(
            "jwt_secret_generated",
            detail="IMS_JWT_SECRET is not set; tokens will not survive a restart",
        )

    engine = build_engine(settings.database_url)
    token_generator = JWTTokenGenerator(settings.jwt_secret, ttl=settings.token_ttl)

    inventory_service = InventoryService(
        product_repo=SqlProductRepository(engine),
        notifier=LogNotifier(),
        low_stock_threshold=settings.low_stock_threshold,
    )
    auth_service = AuthService(
        manager_repo=SqlManagerRepository(engine),
        token_generator=token_generator,
        password_hash_iterations=settings.password_hash_iterations,
    )
    return Container(
        settings=settings,
        engine=engine,
        inventory_service=inventory_service,
        auth_service=auth_service,
        token_generator=token_generator,
    )


def initialize_database(container: Container) -> Manager | None:
    """Create tables and seed the default manager when none exists.

    Returns the seeded manager, or None if nothing was seeded.
    """
    settings = container.settings
    create_schema(container.engine)

    if settings.default_manager_password is None:
        logger.warning(
            "default_manager_not_seeded",
            reason="IMS_DEFAULT_MANAGER_PASSWORD is not set",
        )
        return None

    manager = container.auth_service.ensure_default_manager(
        settings.default_manager_email, settings.default_manager_password
    )
    if manager is not None:
        logger.info("default_manager_seeded", email=manager.email)
    return manager
