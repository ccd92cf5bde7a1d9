"""Application service: manager authentication.

``login`` is the only use case reachable over HTTP. Registering managers
is an operator task (seed step and CLI) and never exposed to clients.
"""

from __future__ import annotations

import structlog

from ims.domain.exceptions import (
    AuthenticationFailedError,
    InvalidCredentialsError,
    TokenGenerationError,
    ValidationError,
)
from ims.domain.model.manager import DEFAULT_HASH_ITERATIONS, Manager, normalize_email
from ims.domain.ports.token_generator import TokenGenerator
from ims.domain.repository.manager_repository import ManagerRepository

logger = structlog.get_logger(__name__)


class AuthService:

    def __init__(
        self,
        manager_repo: ManagerRepository,
        token_generator: TokenGenerator,
        password_hash_iterations: int = DEFAULT_HASH_ITERATIONS,
    ) -> None:
        self._manager_repo = manager_repo
        self._token_generator = token_generator
        self._password_hash_iterations = password_hash_iterations

    def login(self, email: str, password: str) -> str:
        """Verify credentials and return a signed token.

        An unknown email and a wrong password raise the same
        InvalidCredentialsError so callers cannot discover which accounts exist.
        """
        manager = self._manager_repo.get_by_email(normalize_email(email))
        if manager is None:
            logger.warning("login_failed", reason="unknown_email")
            raise InvalidCredentialsError("invalid email or password")

        try:
            manager.check_password(password)
        except AuthenticationFailedError:
            logger.warning("login_failed", reason="bad_password", manager_id=manager.id)
            raise InvalidCredentialsError("invalid email or password") from None

        try:
            token = self._token_generator.generate_token(manager)
        except TokenGenerationError:
            logger.exception("token_generation_failed", manager_id=manager.id)
            raise

        logger.info("login_succeeded", manager_id=manager.id)
        return token

    def register_manager(self, email: str, password: str) -> Manager:
        if email and self._manager_repo.get_by_email(normalize_email(email)) is not None:
            raise ValidationError(f"A manager with email '{normalize_email(email)}' already exists")

        manager = Manager.create(email, password, iterations=self._password_hash_iterations)
        self._manager_repo.add(manager)
        logger.info("manager_registered", manager_id=manager.id, email=manager.email)
        return manager

    def ensure_default_manager(self, email: str, password: str) -> Manager | None:
        """Seed a first manager when the store has none yet."""
        if self._manager_repo.count() > 0:
            return None
        return self.register_manager(email, password)
