from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.team import Team
from src.domain.models.user import User


class DirectoryClient(Protocol):
    """Read access to the external service that owns teams and users.

    Both lookups return None when the record is absent. Implementations do not
    distinguish "not found" from a failed call.
    """

    async def get_team(self, team_id: UUID) -> Team | None: ...

    async def get_user(self, user_id: UUID) -> User | None: ...
