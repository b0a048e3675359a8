from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from src.domain.models.membership import Membership


class MembershipCreate(BaseModel):
    role_id: UUID | None = None
    user_id: UUID
    team_id: UUID


class MembershipResponse(BaseModel):
    id: str
    role_id: str
    user_id: str
    team_id: str

    @classmethod
    def from_domain(cls, membership: Membership) -> MembershipResponse:
        return cls(
            id=str(membership.id),
            role_id=str(membership.role.id),
            user_id=str(membership.user_id),
            team_id=str(membership.team_id),
        )
