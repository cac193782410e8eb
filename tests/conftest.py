"""Pytest configuration and fixtures."""
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = "sqlite+aiosqlite://"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("LOG_FORMAT", "text")

from app.main import app  # noqa: E402
from app.database import Base, get_db  # noqa: E402
from app.models import Project, Task, User, UserProject  # noqa: E402

AVATAR_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00avatar"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession):
    """HTTP client bound to the app with the database dependency overridden."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user with an avatar."""
    user = User(
        name="Test User",
        role="employee",
        code="INV-001",
        login="tester",
        password="secret",
        avatar=AVATAR_BYTES,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession):
    """Create a second user without an avatar."""
    user = User(name="Other User", role="admin", code="INV-002", login="other", password="pw")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_project(db_session: AsyncSession):
    """Create a test project."""
    project = Project(name="Apollo")
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest_asyncio.fixture
async def project_with_tasks(db_session: AsyncSession, test_project: Project, test_user: User, other_user: User):
    """Project with three tasks and two members."""
    db_session.add_all(
        [
            Task(
                name="Assigned",
                date="2024-01-01",
                project_id=test_project.id,
                status="todo",
                empl_id=str(test_user.id),
            ),
            Task(name="Unassigned", date="2024-01-02", project_id=test_project.id, status="in_progress"),
            Task(
                name="Wrapped",
                descr="{needs review}",
                date="2024-01-03",
                project_id=test_project.id,
                status="done",
                priority="{urgent}",
            ),
            UserProject(user_id=test_user.id, project_id=test_project.id),
            UserProject(user_id=other_user.id, project_id=test_project.id),
        ]
    )
    await db_session.commit()
    return test_project


@pytest.fixture
def avatar_bytes():
    """Raw avatar stored for ``test_user``."""
    return AVATAR_BYTES
