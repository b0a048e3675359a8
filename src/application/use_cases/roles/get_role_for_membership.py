from __future__ import annotations

from uuid import UUID

from src.application.errors import ResourceNotFound, require
from src.application.interfaces.directory import DirectoryClient
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.role import Role


async def ensure_team_exists(directory: DirectoryClient, team_id: UUID) -> None:
    if await directory.get_team(team_id) is None:
        raise ResourceNotFound("Team", team_id)


async def ensure_user_exists(directory: DirectoryClient, user_id: UUID) -> None:
    if await directory.get_user(user_id) is None:
        raise ResourceNotFound("User", user_id)


async def execute(
    uow: UnitOfWork,
    directory: DirectoryClient,
    user_id: UUID | None,
    team_id: UUID | None,
) -> Role:
    """Return the role the user holds in the team.

    Team and user existence are checked against the directory before the
    membership lookup, so a missing team or user is always reported first.
    """
    require(user_id=user_id, team_id=team_id)
    await ensure_team_exists(directory, team_id)
    await ensure_user_exists(directory, user_id)

    membership = await uow.memberships.get_by_user_and_team(user_id, team_id)
    if membership is None:
        raise ResourceNotFound("Membership", f"userId:{user_id} teamId:{team_id}")
    return membership.role
