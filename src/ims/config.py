"""Process-wide configuration.

Everything that used to be a global constant (signing secret, low-stock
threshold, hashing cost) lives on one immutable ``Settings`` object that
the composition root hands to constructors. ``Settings.from_env`` reads
the environment, after loading a ``.env`` file if one is present.
"""

from __future__ import annotations

import os
import secrets
from dataclasses import dataclass, field
from datetime import timedelta

from dotenv import load_dotenv


class ConfigurationError(ValueError):
    """An environment variable holds a value the application cannot use."""


@dataclass(frozen=True)
class Settings:

    database_url: str = "sqlite:///inventory.db"
    jwt_secret: str = field(default_factory=lambda: secrets.token_urlsafe(32), repr=False)
    token_ttl: timedelta = timedelta(hours=24)
    low_stock_threshold: int = 10
    password_hash_iterations: int = 600_000
    default_manager_email: str = "admin@inventory.local"
    default_manager_password: str | None = field(default=None, repr=False)
    host: str = "127.0.0.1"
    port: int = 8080
    environment: str = "development"
    log_level: str = "DEBUG"
    jwt_secret_generated: bool = False

    @classmethod
    def from_env(cls, env: dict[str, str] | None = None) -> Settings:
        """Build settings from ``env`` (defaults to ``os.environ``)."""
        if env is None:
            load_dotenv()
            env = dict(os.environ)

        environment = env.get("IMS_ENV", "development").lower()
        secret = env.get("IMS_JWT_SECRET")

        return cls(
            database_url=env.get("IMS_DATABASE_URL", "sqlite:///inventory.db"),
            jwt_secret=secret or secrets.token_urlsafe(32),
            jwt_secret_generated=not secret,
            token_ttl=timedelta(hours=_positive_int(env, "IMS_TOKEN_TTL_HOURS", 24)),
            low_stock_threshold=_positive_int(env, "IMS_LOW_STOCK_THRESHOLD", 10),
            password_hash_iterations=_positive_int(
                env, "IMS_PASSWORD_HASH_ITERATIONS", 600_000
            ),
            default_manager_email=env.get(
                "IMS_DEFAULT_MANAGER_EMAIL", "admin@inventory.local"
            ),
            default_manager_password=env.get("IMS_DEFAULT_MANAGER_PASSWORD") or None,
            host=env.get("IMS_HOST", "127.0.0.1"),
            port=_positive_int(env, "IMS_PORT", 8080),
            environment=environment,
            log_level=env.get("LOG_LEVEL", _default_log_level(environment)).upper(),
        )

    @property
    def is_production(self) -> bool:
        return self.environment in ("production", "staging")


def _default_log_level(environment: str) -> str:
    level_map = {
        "production": "INFO",
        "staging": "INFO",
        "development": "DEBUG",
        "test": "WARNING",
    }
    return level_map.get(environment, "INFO")


def _positive_int(env: dict[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {value}")
    return value
