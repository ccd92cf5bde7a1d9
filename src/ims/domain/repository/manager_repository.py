"""Abstract repository for Manager entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.manager import Manager


class ManagerRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> Manager | None:
        """Return the manager registered under ``email``, or None."""

    @abstractmethod
    def add(self, manager: Manager) -> None:
        """Persist a new manager (password already hashed)."""

    @abstractmethod
    def count(self) -> int:
        """Number of registered managers."""
