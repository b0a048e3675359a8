from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ResourceExists
from src.application.interfaces.repositories.memberships import MembershipRepository
from src.domain.models.membership import Membership
from src.infrastructure.db.orm.membership import MembershipORM
from src.infrastructure.repos.roles_sqlalchemy import role_to_domain


class MembershipsSQLAlchemyRepository(MembershipRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MembershipORM) -> Membership:
        return Membership(
            id=orm.id,
            user_id=orm.user_id,
            team_id=orm.team_id,
            role=role_to_domain(orm.role),
            created_at=orm.created_at,
        )

    async def _list_where(self, *criteria) -> list[Membership]:
        stmt = select(MembershipORM).where(*criteria).order_by(MembershipORM.created_at)
        res = await self.session.execute(stmt)
        return [self._to_domain(row) for row in res.scalars().all()]

    async def add(self, membership: Membership) -> Membership:
        orm = MembershipORM(
            id=membership.id,
            user_id=membership.user_id,
            team_id=membership.team_id,
            role_id=membership.role.id,
            created_at=membership.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ResourceExists("Membership") from exc
        return membership

    async def get_by_user_and_team(self, user_id: UUID, team_id: UUID) -> Membership | None:
        stmt = (
            select(MembershipORM)
            .where(MembershipORM.user_id == user_id)
            .where(MembershipORM.team_id == team_id)
        )
        res = await self.session.execute(stmt)
        row = res.scalar_one_or_none()
        return self._to_domain(row) if row else None

    async def list_by_role(self, role_id: UUID) -> list[Membership]:
        return await self._list_where(MembershipORM.role_id == role_id)

    async def list_by_user(self, user_id: UUID) -> list[Membership]:
        return await self._list_where(MembershipORM.user_id == user_id)

    async def list_by_team(self, team_id: UUID) -> list[Membership]:
        return await self._list_where(MembershipORM.team_id == team_id)
