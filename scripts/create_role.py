#!/usr/bin/env python3
"""
Script to create a role.

Usage:
  python scripts/create_role.py --name "Scrum Master"

Prints the id of the new role. Exits with status 1 if the role already exists.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.application.use_cases.roles import create_role
from src.config.settings import get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_role_from_cli(name: str) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            role = await create_role.execute(uow, create_role.CreateRoleInput(name=name))
        print(f"✅ Role '{role.name}' created (ID: {role.id})")
    except AppError as exc:
        print(f"\n❌ Error creating role: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Create a new role",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/create_role.py --name "Scrum Master"
        """,
    )
    parser.add_argument("--name", required=True, help="Name of the role")

    args = parser.parse_args()

    name = args.name.strip()
    if not name:
        print("❌ Error: role name must not be blank")
        sys.exit(1)

    asyncio.run(create_role_from_cli(name))
