from __future__ import annotations

from uuid import UUID

from src.application.errors import require
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership


async def execute(uow: UnitOfWork, role_id: UUID | None) -> list[Membership]:
    require(role_id=role_id)
    return await uow.memberships.list_by_role(role_id)
