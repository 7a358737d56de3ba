"""Seeding of the permission catalog."""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rolegate.core.permissions.catalog import PERMISSION_CATALOG
from rolegate.core.permissions.models import Permission


logger = structlog.get_logger()


async def seed_permission_catalog(session: AsyncSession) -> list[Permission]:
    """Insert every catalog permission that is not stored yet.

    Existing rows are left untouched, so running this repeatedly is safe.

    Returns:
        The permissions that were created
    """
    result = await session.execute(select(Permission.name))
    existing = set(result.scalars().all())

    created = [
        Permission(name=spec.name, description=spec.description, category=spec.category)
        for spec in PERMISSION_CATALOG
        if spec.name not in existing
    ]
    session.add_all(created)
    await session.flush()

    logger.info(
        "permission_catalog_seeded",
        created=len(created),
        existing=len(existing),
    )
    return created
