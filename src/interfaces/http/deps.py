from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request

from src.application.interfaces.directory import DirectoryClient
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_directory_client(request: Request) -> DirectoryClient:
    client = getattr(request.app.state, "directory_client", None)
    if client is None:
        raise RuntimeError("Directory client not configured")
    return client


def get_app_settings() -> Settings:
    return get_settings()
