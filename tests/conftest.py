import pytest
import httpx
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from userhub.db.database import Base, get_db
from userhub.models import User  # noqa: F401
from userhub.clients.users import UsersClient
from main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def session_maker(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest.fixture
async def db_session(session_maker):
    """Create test database session."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def asgi_transport(session_maker):
    """Transport that serves requests from the app against the test database."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield httpx.ASGITransport(app=app)
    app.dependency_overrides.clear()


@pytest.fixture
async def api_client(asgi_transport):
    async with httpx.AsyncClient(transport=asgi_transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def users_client(asgi_transport):
    return UsersClient(base_url="http://testserver", transport=asgi_transport)
