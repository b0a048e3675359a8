from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.role import Role


class RoleRepository(Protocol):
    async def add(self, role: Role) -> Role: ...

    async def get(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...
