from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ResourceExists
from src.application.interfaces.repositories.roles import RoleRepository
from src.domain.models.role import Role
from src.infrastructure.db.orm.role import RoleORM


def role_to_domain(orm: RoleORM) -> Role:
    return Role(id=orm.id, name=orm.name)


class RolesSQLAlchemyRepository(RoleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, role: Role) -> Role:
        orm = RoleORM(id=role.id, name=role.name)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ResourceExists("Role") from exc
        return role_to_domain(orm)

    async def get(self, role_id: UUID) -> Role | None:
        orm = await self.session.get(RoleORM, role_id)
        return role_to_domain(orm) if orm else None

    async def get_by_name(self, name: str) -> Role | None:
        stmt = select(RoleORM).where(RoleORM.name == name)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return role_to_domain(orm) if orm else None

    async def list_all(self) -> list[Role]:
        stmt = select(RoleORM).order_by(RoleORM.name)
        res = await self.session.execute(stmt)
        return [role_to_domain(x) for x in res.scalars().all()]
