from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.membership import Membership


class MembershipRepository(Protocol):
    async def add(self, membership: Membership) -> Membership: ...

    async def get_by_user_and_team(self, user_id: UUID, team_id: UUID) -> Membership | None: ...

    async def list_by_role(self, role_id: UUID) -> list[Membership]: ...

    async def list_by_user(self, user_id: UUID) -> list[Membership]: ...

    async def list_by_team(self, team_id: UUID) -> list[Membership]: ...
