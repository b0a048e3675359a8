from __future__ import annotations

from uuid import uuid4

from sqlalchemy import func, select

from src.infrastructure.db.orm.role import RoleORM

ROLES = "/api/v1/roles/"
MEMBERSHIPS = "/api/v1/roles/memberships/"


async def _assign(client, seeded_roles, coral_lynx, *, role="Developer", user="member"):
    response = await client.post(
        MEMBERSHIPS,
        json={
            "role_id": str(seeded_roles[role]),
            "user_id": str(coral_lynx[user]),
            "team_id": str(coral_lynx["team"]),
        },
    )
    assert response.status_code == 201
    return response.json()


async def test_unknown_path_returns_not_found(client):
    response = await client.get("/api/v1/role")
    assert response.status_code == 404


async def test_create_role(app, client, seeded_roles):
    response = await client.post(ROLES, json={"name": "  DevOps "})
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "DevOps"

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        total = await session.scalar(select(func.count()).select_from(RoleORM))
    assert total == 4


async def test_create_role_rejects_missing_or_blank_name(client):
    for payload in ({}, {"name": ""}, {"name": "   "}):
        response = await client.post(ROLES, json=payload)
        assert response.status_code == 400
        assert response.json()["code"] == "bad_request"


async def test_create_role_with_existing_name(client, seeded_roles):
    response = await client.post(ROLES, json={"name": "Developer"})
    assert response.status_code == 400
    assert response.json() == {
        "code": "already_exists",
        "message": "Role already exists",
        "details": {"entity": "Role"},
    }


async def test_list_roles(client, seeded_roles):
    response = await client.get(ROLES)
    assert response.status_code == 200
    names = [r["name"] for r in response.json()]
    assert names == ["Developer", "Product Owner", "Tester"]


async def test_get_role_by_id(client, seeded_roles):
    response = await client.get(f"{ROLES}{seeded_roles['Tester']}")
    assert response.status_code == 200
    assert response.json() == {"id": str(seeded_roles["Tester"]), "name": "Tester"}


async def test_get_missing_role(client, seeded_roles):
    missing = uuid4()
    response = await client.get(f"{ROLES}{missing}")
    assert response.status_code == 404
    assert response.json()["message"] == f"Role {missing} not found"


async def test_get_role_by_user_and_team(client, seeded_roles, coral_lynx):
    await _assign(client, seeded_roles, coral_lynx)
    response = await client.get(
        f"{ROLES}search",
        params={"team_member_id": str(coral_lynx["member"]), "team_id": str(coral_lynx["team"])},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Developer"


async def test_get_role_by_user_and_team_requires_both(client, coral_lynx):
    response = await client.get(f"{ROLES}search", params={"team_id": str(coral_lynx["team"])})
    assert response.status_code == 400
    assert response.json()["details"] == {"missing": ["user_id"]}

    response = await client.get(
        f"{ROLES}search", params={"team_member_id": str(coral_lynx["member"])}
    )
    assert response.status_code == 400


async def test_get_role_by_user_and_unknown_team(client, coral_lynx):
    missing_team = uuid4()
    response = await client.get(
        f"{ROLES}search",
        params={"team_member_id": str(coral_lynx["member"]), "team_id": str(missing_team)},
    )
    assert response.status_code == 404
    assert response.json()["message"] == f"Team {missing_team} not found"


async def test_filter_with_both_ids(client, seeded_roles, coral_lynx):
    await _assign(client, seeded_roles, coral_lynx)
    response = await client.get(
        ROLES,
        params={"team_member_id": str(coral_lynx["member"]), "team_id": str(coral_lynx["team"])},
    )
    assert response.status_code == 200
    assert response.json() == [{"id": str(seeded_roles["Developer"]), "name": "Developer"}]


async def test_filter_with_unknown_user(client, coral_lynx):
    ghost = uuid4()
    response = await client.get(
        ROLES, params={"team_member_id": str(ghost), "team_id": str(coral_lynx["team"])}
    )
    assert response.status_code == 404
    assert response.json()["message"] == f"User {ghost} not found"


async def test_filter_by_user_only(client, seeded_roles, coral_lynx):
    await _assign(client, seeded_roles, coral_lynx)
    response = await client.get(ROLES, params={"team_member_id": str(coral_lynx["member"])})
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Developer"]


async def test_filter_by_team_only_deduplicates(client, seeded_roles, coral_lynx):
    await _assign(client, seeded_roles, coral_lynx, user="member")
    await _assign(client, seeded_roles, coral_lynx, user="lead")
    response = await client.get(ROLES, params={"team_id": str(coral_lynx["team"])})
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Developer"]


async def test_filter_by_unknown_team(client):
    response = await client.get(ROLES, params={"team_id": str(uuid4())})
    assert response.status_code == 404
    assert response.json()["details"]["entity"] == "Team"


async def test_health(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
