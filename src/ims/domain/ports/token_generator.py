"""Outbound port for issuing and checking manager credentials."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.manager import Manager


class TokenGenerator(ABC):

    @abstractmethod
    def generate_token(self, manager: Manager) -> str:
        """Issue a signed, time-limited token whose subject is the manager ID.

        Raises TokenGenerationError if signing fails.
        """

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """Return the subject of a valid token.

        Raises UnauthorizedError for a bad signature, an expired token or
        unexpected issuer/audience.
        """
