"""
Pytest configuration and fixtures for base API testing.
Provides settings, in-memory and SQLite user stores, a fakeredis-backed job
queue and an HTTP client bound to the app.
"""
import os

# Settings are read from the environment; set them before anything loads them
os.environ.setdefault("SECRET_KEY", "unit-test-signing-key-a8f3c2d9e7b14f06b5d2")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JOB_SIMULATED_DELAY_SECONDS", "0")

import fakeredis
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from base_api.container import build_container
from base_api.core.config import Settings
from base_api.core.database import create_session_factory, create_tables
from base_api.core.security import PasswordHasher, TokenIssuer
from base_api.main import create_app
from base_api.queue.rq_job_queue import RQJobQueue, RQQueueConfig
from base_api.repositories.in_memory_user_repository import InMemoryUserRepository
from base_api.repositories.user_repository import UserRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_SECRET_KEY = os.environ["SECRET_KEY"]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SECRET_KEY=TEST_SECRET_KEY,
        ENVIRONMENT="test",
        BCRYPT_ROUNDS=4,
        DATABASE_URL=TEST_DATABASE_URL,
        JOB_SIMULATED_DELAY_SECONDS=0,
        _env_file=None,
    )


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer(settings) -> TokenIssuer:
    return TokenIssuer.from_settings(settings)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def redis_connection():
    connection = fakeredis.FakeRedis(server=fakeredis.FakeServer())
    yield connection
    connection.flushall()


@pytest.fixture
def job_queue(redis_connection) -> RQJobQueue:
    return RQJobQueue(redis_connection, RQQueueConfig(queue_name="test-messages"))


@pytest_asyncio.fixture
async def test_engine():
    """Create in-memory SQLite engine shared across sessions."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_user_repository(test_engine) -> UserRepository:
    return UserRepository(create_session_factory(test_engine))


@pytest.fixture
def container(settings, user_repository, job_queue, password_hasher):
    return build_container(
        settings,
        user_repository=user_repository,
        job_queue=job_queue,
        password_hasher=password_hasher,
    )


@pytest.fixture
def app(container):
    return create_app(container)


@pytest_asyncio.fixture
async def client(app):
    """Create async HTTP client for API testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
