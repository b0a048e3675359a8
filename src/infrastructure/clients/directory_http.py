from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

import httpx

from src.application.interfaces.directory import DirectoryClient
from src.domain.models.team import Team
from src.domain.models.user import User

logger = logging.getLogger(__name__)


def _optional_uuid(value: Any) -> UUID | None:
    return UUID(str(value)) if value else None


def team_from_payload(data: dict[str, Any]) -> Team:
    member_ids = data.get("teamMemberIds")
    return Team(
        id=UUID(str(data["id"])),
        name=data.get("name"),
        team_lead_id=_optional_uuid(data.get("teamLeadId")),
        team_member_ids=(
            frozenset(UUID(str(v)) for v in member_ids) if member_ids is not None else None
        ),
    )


def user_from_payload(data: dict[str, Any]) -> User:
    return User(
        id=UUID(str(data["id"])),
        first_name=data.get("firstName"),
        last_name=data.get("lastName"),
        display_name=data.get("displayName"),
        avatar_url=data.get("avatarUrl"),
        location=data.get("location"),
    )


class HttpDirectoryClient(DirectoryClient):
    """Fetches teams and users from the external directory over HTTP.

    Any failure (404, other error status, transport error, unreadable body)
    is logged and reported as a missing record.
    """

    def __init__(
        self,
        *,
        teams_url: str,
        users_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.teams_url = teams_url.rstrip("/")
        self.users_url = users_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _fetch(self, url: str) -> dict[str, Any] | None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            logger.warning("Directory request failed: GET %s (%s)", url, exc)
            return None
        if resp.status_code == 404:
            logger.debug("Directory record not found: %s", url)
            return None
        if resp.status_code >= 400:
            logger.warning("Directory error %s for %s: %s", resp.status_code, url, resp.text)
            return None
        try:
            payload = resp.json()
        except ValueError:
            logger.warning("Directory returned a non-JSON body for %s", url)
            return None
        return payload if isinstance(payload, dict) else None

    async def get_team(self, team_id: UUID) -> Team | None:
        data = await self._fetch(f"{self.teams_url}/{team_id}")
        if data is None:
            return None
        try:
            return team_from_payload(data)
        except (KeyError, TypeError, ValueError):
            logger.warning("Malformed team payload for %s: %s", team_id, data)
            return None

    async def get_user(self, user_id: UUID) -> User | None:
        data = await self._fetch(f"{self.users_url}/{user_id}")
        if data is None:
            return None
        try:
            return user_from_payload(data)
        except (KeyError, TypeError, ValueError):
            logger.warning("Malformed user payload for %s: %s", user_id, data)
            return None
