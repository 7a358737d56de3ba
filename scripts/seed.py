#!/usr/bin/env python
"""
Seed the permission catalog and, optionally, bootstrap a super admin.
"""

import argparse
import asyncio
import sys

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


# Add src to path for imports
sys.path.insert(0, "src")

from rolegate.core.database import async_session_factory
from rolegate.core.permissions import Role
from rolegate.core.permissions.seed import seed_permission_catalog
from rolegate.modules.users.models import User


SCENARIOS = ("catalog", "demo")

DEMO_USERS = [
    {"email": "moderator@example.com", "name": "Demo Moderator", "role": Role.MODERATOR},
    {"email": "admin@example.com", "name": "Demo Admin", "role": Role.ADMIN},
    {"email": "user@example.com", "name": "Demo User", "role": Role.USER},
]


async def bootstrap_super_admin(session: AsyncSession, email: str) -> User:
    """Create a super admin, or promote the existing principal with ``email``.

    Role assignment through the API can never produce a super admin, so the
    first one has to come from here.
    """
    result = await session.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if user is None:
        user = User(email=email, role=Role.SUPER_ADMIN)
        session.add(user)
        print(f"Created super admin: {email}")
    elif user.role is Role.SUPER_ADMIN:
        print(f"Super admin already exists: {email}")
    else:
        print(f"Promoted {email} from {user.role.value} to super_admin")
        user.role = Role.SUPER_ADMIN

    await session.flush()
    return user


async def seed_demo_users(session: AsyncSession) -> list[User]:
    """Create one demo principal per assignable role."""
    created = []
    for data in DEMO_USERS:
        result = await session.execute(select(User).where(User.email == data["email"]))
        existing = result.scalar_one_or_none()

        if existing:
            print(f"User already exists: {existing.email}")
            continue

        user = User(**data)
        session.add(user)
        created.append(user)
        print(f"Created {user.role.value}: {user.email}")

    await session.flush()
    return created


async def main(scenario: str, super_admin_email: str | None = None) -> None:
    """Run the seeding based on scenario."""
    if scenario not in SCENARIOS:
        print(f"Unknown scenario: {scenario}")
        print(f"Available scenarios: {', '.join(SCENARIOS)}")
        sys.exit(1)

    async with async_session_factory() as session:
        created = await seed_permission_catalog(session)
        print(f"Seeded {len(created)} new permissions")

        if scenario == "demo":
            await seed_demo_users(session)

        if super_admin_email:
            await bootstrap_super_admin(session, super_admin_email)

        await session.commit()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the permission catalog")
    parser.add_argument(
        "--scenario",
        "-s",
        default="catalog",
        help="Seed scenario to run (catalog, demo)",
    )
    parser.add_argument(
        "--super-admin-email",
        default=None,
        help="Create or promote a super admin with this email",
    )
    args = parser.parse_args()

    asyncio.run(main(args.scenario, args.super_admin_email))
