from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.role import Role


async def execute(uow: UnitOfWork) -> list[Role]:
    return await uow.roles.list_all()
