from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.models.role import Role


@dataclass(slots=True, frozen=True)
class Membership:
    id: UUID
    user_id: UUID
    team_id: UUID
    role: Role
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, *, user_id: UUID, team_id: UUID, role: Role) -> Membership:
        return cls(
            id=uuid4(),
            user_id=user_id,
            team_id=team_id,
            role=role,
            created_at=datetime.now(timezone.utc),
        )
