from __future__ import annotations

from pydantic import BaseModel, field_validator

from src.domain.models.role import Role


class RoleCreate(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class RoleResponse(BaseModel):
    id: str
    name: str

    @classmethod
    def from_domain(cls, role: Role) -> RoleResponse:
        return cls(id=str(role.id), name=role.name)
