from __future__ import annotations

from uuid import UUID

from src.application.interfaces.directory import DirectoryClient
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.roles import get_role_for_membership, list_roles
from src.domain.models.membership import Membership
from src.domain.models.role import Role


def unique_roles(memberships: list[Membership]) -> list[Role]:
    """Roles of the given memberships, one per role id, in first-seen order."""
    seen: set[UUID] = set()
    roles: list[Role] = []
    for membership in memberships:
        if membership.role.id in seen:
            continue
        seen.add(membership.role.id)
        roles.append(membership.role)
    return roles


async def execute(
    uow: UnitOfWork,
    directory: DirectoryClient,
    user_id: UUID | None = None,
    team_id: UUID | None = None,
) -> list[Role]:
    if user_id is None and team_id is None:
        return await list_roles.execute(uow)
    if user_id is not None and team_id is not None:
        role = await get_role_for_membership.execute(uow, directory, user_id, team_id)
        return [role]

    if user_id is not None:
        await get_role_for_membership.ensure_user_exists(directory, user_id)
        memberships = await uow.memberships.list_by_user(user_id)
    else:
        await get_role_for_membership.ensure_team_exists(directory, team_id)
        memberships = await uow.memberships.list_by_team(team_id)
    return unique_roles(memberships)
