from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.interfaces.directory import DirectoryClient
from src.application.use_cases.roles import (
    create_role,
    get_role,
    get_role_for_membership,
    search_roles,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_directory_client, get_uow
from src.interfaces.http.schemas.roles import RoleCreate, RoleResponse

router = APIRouter(prefix="/roles", tags=["roles"])


@router.post("/", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role_endpoint(
    payload: RoleCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    created = await create_role.execute(uow, create_role.CreateRoleInput(name=payload.name))
    return RoleResponse.from_domain(created)


@router.get("/", response_model=list[RoleResponse])
async def list_roles(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    directory: DirectoryClient = Depends(get_directory_client),
    team_member_id: UUID | None = Query(None),
    team_id: UUID | None = Query(None),
):
    roles = await search_roles.execute(uow, directory, user_id=team_member_id, team_id=team_id)
    return [RoleResponse.from_domain(r) for r in roles]


# Declared before "/{role_id}" so "search" is not parsed as an id
@router.get("/search", response_model=RoleResponse)
async def get_role_by_membership(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    directory: DirectoryClient = Depends(get_directory_client),
    team_member_id: UUID | None = Query(None),
    team_id: UUID | None = Query(None),
):
    role = await get_role_for_membership.execute(uow, directory, team_member_id, team_id)
    return RoleResponse.from_domain(role)


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role_endpoint(
    role_id: UUID,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    role = await get_role.execute(uow, role_id)
    return RoleResponse.from_domain(role)
