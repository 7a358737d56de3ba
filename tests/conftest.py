"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from rolegate.core.auth.backend import create_access_token
from rolegate.core.database import Base, get_db
from rolegate.core.permissions import Permission, Role, UserPermission
from rolegate.core.permissions.seed import seed_permission_catalog
from rolegate.main import create_app
from rolegate.modules.users.models import User
from tests.factories.user import make_user


# In-memory SQLite keeps the suite free of a running database server
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session shared by the test and the app.

    Each test runs in its own transaction that is rolled back after the
    test completes.
    """
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(bind=conn) as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Catalog, User and Token Fixtures
# ============================================================


@pytest.fixture
async def catalog(db: AsyncSession) -> dict[str, Permission]:
    """Seed the permission catalog.

    Returns:
        Permissions keyed by name
    """
    permissions = await seed_permission_catalog(db)
    return {p.name: p for p in permissions}


@pytest.fixture
def create_user(db: AsyncSession) -> Callable:
    """Factory fixture that persists a user with the given role."""

    async def _create(role: Role = Role.USER, **kwargs) -> User:
        user = make_user(role, **kwargs)
        db.add(user)
        await db.flush()
        await db.refresh(user)
        return user

    return _create


@pytest.fixture
def grant(db: AsyncSession) -> Callable:
    """Factory fixture that stores an explicit grant."""

    async def _grant(user: User, permission: Permission) -> UserPermission:
        user_permission = UserPermission(
            user_id=user.id,
            permission_id=permission.id,
            permission=permission,
        )
        db.add(user_permission)
        await db.flush()
        await db.refresh(user_permission, attribute_names=["granted_at"])
        return user_permission

    return _grant


@pytest.fixture
async def plain_user(create_user) -> User:
    return await create_user(Role.USER)


@pytest.fixture
async def moderator(create_user) -> User:
    return await create_user(Role.MODERATOR)


@pytest.fixture
async def admin(create_user) -> User:
    return await create_user(Role.ADMIN)


@pytest.fixture
async def super_admin(create_user) -> User:
    return await create_user(Role.SUPER_ADMIN)


def auth_headers(user: User) -> dict[str, str]:
    """Authorization headers carrying a valid access token for ``user``."""
    token = create_access_token(user_id=user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for() -> Callable[[User], dict[str, str]]:
    """Expose ``auth_headers`` to tests."""
    return auth_headers
