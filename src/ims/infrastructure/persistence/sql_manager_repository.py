"""SQL-backed implementation of ManagerRepository."""

from __future__ import annotations

from sqlalchemy import Engine, func, insert, select

from ims.domain.model.manager import Manager
from ims.domain.repository.manager_repository import ManagerRepository
from ims.infrastructure.persistence.database import managers, translate_errors


class SqlManagerRepository(ManagerRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_email(self, email: str) -> Manager | None:
        with translate_errors("get_manager"), self._engine.connect() as conn:
            row = conn.execute(
                select(managers).where(managers.c.email == email)
            ).one_or_none()
        if row is None:
            return None
        return Manager(id=row.id, email=row.email, password=row.password)

    def add(self, manager: Manager) -> None:
        with translate_errors("add_manager"), self._engine.begin() as conn:
            conn.execute(
                insert(managers).values(
                    id=manager.id, email=manager.email, password=manager.password
                )
            )

    def count(self) -> int:
        with translate_errors("count_managers"), self._engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(managers)).scalar_one()
