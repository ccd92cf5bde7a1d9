"""Relational schema and engine setup (SQLAlchemy Core).

Two independent tables, one per entity. ``create_schema`` is idempotent so
it can run on every start-up.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy import (
    Column,
    DateTime,
    Engine,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
)
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from ims.domain.exceptions import RepositoryError

logger = structlog.get_logger(__name__)

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("price", Float, nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
)

managers = Table(
    "managers",
    metadata,
    Column("id", String, primary_key=True),
    Column("email", String, nullable=False, unique=True),
    Column("password", String, nullable=False),
)


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    In-memory SQLite gets a single shared connection; otherwise every
    pooled connection would see its own empty database.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url)


def create_schema(engine: Engine) -> None:
    with translate_errors("create_schema"):
        metadata.create_all(engine)
    logger.info("database_initialized", url=engine.url.render_as_string(hide_password=True))


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Turn driver failures into RepositoryError, keeping details in the log."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("repository_error", operation=operation)
        raise RepositoryError(f"Repository operation '{operation}' failed") from exc
