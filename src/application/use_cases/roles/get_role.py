from __future__ import annotations

from uuid import UUID

from src.application.errors import ResourceNotFound, require
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.role import Role


async def execute(uow: UnitOfWork, role_id: UUID) -> Role:
    require(role_id=role_id)
    role = await uow.roles.get(role_id)
    if role is None:
        raise ResourceNotFound("Role", role_id)
    return role
