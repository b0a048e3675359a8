from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.errors import ResourceExists
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateRoleInput:
    name: str


async def execute(uow: UnitOfWork, payload: CreateRoleInput) -> Role:
    if await uow.roles.get_by_name(payload.name) is not None:
        raise ResourceExists("Role")
    created = await uow.roles.add(Role.create(payload.name))
    await uow.commit()
    logger.info("Role created: %s (%s)", created.name, created.id)
    return created
