"""Manager entity: an operator allowed to manage the inventory.

Managers are created at setup time (seed or CLI) and are read-only as far
as the HTTP API is concerned. The password field holds plaintext only
between construction and ``hash_password``; everything that persists a
manager goes through ``Manager.create`` which hashes immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ims.domain.exceptions import (
    AuthenticationFailedError,
    HashingError,
    ValidationError,
)
from ims.domain.model.value_objects import new_id

DEFAULT_HASH_ITERATIONS = 600_000


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass
class Manager:

    id: str
    email: str
    password: str

    @classmethod
    def create(
        cls,
        email: str,
        password: str,
        iterations: int = DEFAULT_HASH_ITERATIONS,
    ) -> Manager:
        """Build a manager with a fresh ID and an already-hashed password."""
        if not email or "@" not in email:
            raise ValidationError("A valid manager email is required")
        if not password:
            raise ValidationError("Manager password cannot be empty")

        manager = cls(id=new_id(), email=normalize_email(email), password=password)
        manager.hash_password(iterations)
        return manager

    def hash_password(self, iterations: int = DEFAULT_HASH_ITERATIONS) -> None:
        """Replace the plaintext password with a salted PBKDF2-SHA256 hash."""
        try:
            self.password = generate_password_hash(
                self.password, method=f"pbkdf2:sha256:{iterations}"
            )
        except (TypeError, ValueError) as exc:
            raise HashingError("Could not hash manager password") from exc

    def check_password(self, candidate: str) -> None:
        """Raise AuthenticationFailedError unless ``candidate`` matches."""
        try:
            matches = check_password_hash(self.password, candidate)
        except (TypeError, ValueError):
            matches = False
        if not matches:
            raise AuthenticationFailedError("Password does not match")
