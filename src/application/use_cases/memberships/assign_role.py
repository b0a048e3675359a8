from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import InvalidArgument, ResourceExists, ResourceNotFound, require
from src.application.interfaces.directory import DirectoryClient
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.membership import Membership
from src.domain.models.team import is_user_in_team

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssignRoleInput:
    user_id: UUID | None
    team_id: UUID | None
    role_id: UUID | None = None


async def execute(
    uow: UnitOfWork,
    directory: DirectoryClient,
    payload: AssignRoleInput,
) -> Membership:
    """Assign a role to a user within a team.

    The checks run in a fixed order and the first failing one wins:
    role reference, existing membership, role record, team, team membership,
    user.
    """
    require(user_id=payload.user_id, team_id=payload.team_id)

    if payload.role_id is None:
        raise InvalidArgument("Role")

    existing = await uow.memberships.get_by_user_and_team(payload.user_id, payload.team_id)
    if existing is not None:
        raise ResourceExists("Membership")

    role = await uow.roles.get(payload.role_id)
    if role is None:
        raise ResourceNotFound("Role", payload.role_id)

    team = await directory.get_team(payload.team_id)
    if team is None:
        raise ResourceNotFound("Team", payload.team_id)

    if not is_user_in_team(payload.user_id, team):
        raise InvalidArgument(
            "Membership", "The provided user doesn't belong to the provided team."
        )

    user = await directory.get_user(payload.user_id)
    if user is None:
        raise ResourceNotFound("User", payload.user_id)

    membership = Membership.create(user_id=payload.user_id, team_id=payload.team_id, role=role)
    created = await uow.memberships.add(membership)
    await uow.commit()
    logger.info(
        "Role %s assigned to user %s in team %s", role.name, created.user_id, created.team_id
    )
    return created
