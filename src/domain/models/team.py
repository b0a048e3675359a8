from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(slots=True, frozen=True)
class Team:
    """Read-only view of a team served by the external directory."""

    id: UUID
    team_lead_id: UUID | None = None
    team_member_ids: frozenset[UUID] | None = None
    name: str | None = None


def is_user_in_team(user_id: UUID, team: Team) -> bool:
    if user_id == team.team_lead_id:
        return True
    if not team.team_member_ids:
        return False
    return user_id in team.team_member_ids
