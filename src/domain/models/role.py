from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class Role:
    id: UUID
    name: str

    @classmethod
    def create(cls, name: str) -> Role:
        return cls(id=uuid4(), name=name)
