from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.interfaces.directory import DirectoryClient
from src.application.use_cases.memberships import assign_role, list_by_role
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_directory_client, get_uow
from src.interfaces.http.schemas.memberships import MembershipCreate, MembershipResponse

router = APIRouter(prefix="/roles/memberships", tags=["memberships"])


@router.post("/", response_model=MembershipResponse, status_code=status.HTTP_201_CREATED)
async def assign_role_to_membership(
    payload: MembershipCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    directory: DirectoryClient = Depends(get_directory_client),
):
    membership = await assign_role.execute(
        uow,
        directory,
        assign_role.AssignRoleInput(
            user_id=payload.user_id,
            team_id=payload.team_id,
            role_id=payload.role_id,
        ),
    )
    return MembershipResponse.from_domain(membership)


@router.get("/search", response_model=list[MembershipResponse])
async def list_memberships_by_role(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    role_id: UUID | None = Query(None),
):
    memberships = await list_by_role.execute(uow, role_id)
    return [MembershipResponse.from_domain(m) for m in memberships]
