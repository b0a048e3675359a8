from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.team import Team
from src.domain.models.user import User
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import membership, role  # noqa: F401
from src.infrastructure.db.orm.role import RoleORM
from src.interfaces.http.main import create_app


class StubDirectoryClient:
    """In-memory stand-in for the external teams/users service."""

    def __init__(self) -> None:
        self.teams: dict[UUID, Team] = {}
        self.users: dict[UUID, User] = {}
        self.calls: list[tuple[str, UUID]] = []

    def add_team(self, team: Team) -> Team:
        self.teams[team.id] = team
        return team

    def add_user(self, user_id: UUID) -> User:
        user = User(id=user_id, display_name=f"user-{str(user_id)[:8]}")
        self.users[user_id] = user
        return user

    async def get_team(self, team_id: UUID) -> Team | None:
        self.calls.append(("team", team_id))
        return self.teams.get(team_id)

    async def get_user(self, user_id: UUID) -> User | None:
        self.calls.append(("user", user_id))
        return self.users.get(user_id)


@pytest.fixture()
def directory() -> StubDirectoryClient:
    return StubDirectoryClient()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings, directory: StubDirectoryClient):
    return create_app(settings=test_settings, directory_client=directory)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_roles(app, client) -> dict[str, UUID]:
    roles = {"Developer": uuid4(), "Product Owner": uuid4(), "Tester": uuid4()}
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        session.add_all([RoleORM(id=role_id, name=name) for name, role_id in roles.items()])
        await session.commit()
    return roles


@pytest.fixture()
def coral_lynx(directory: StubDirectoryClient) -> dict[str, UUID]:
    """Team with a lead and one member, both known to the directory."""
    lead_id, member_id = uuid4(), uuid4()
    team = directory.add_team(
        Team(
            id=uuid4(),
            name="Ordinary Coral Lynx",
            team_lead_id=lead_id,
            team_member_ids=frozenset({member_id}),
        )
    )
    directory.add_user(lead_id)
    directory.add_user(member_id)
    return {"team": team.id, "lead": lead_id, "member": member_id}
