import contextlib
import os

# Settings and the engine are built at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_event_rsvp.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from eventrsvp.main import app  # noqa: E402
from eventrsvp.models.base import BaseModel  # noqa: E402


@pytest.fixture
def client_factory():
    """Build a test client with FastAPI dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac


@pytest.fixture
async def db_session(tmp_path):
    """A session on a throwaway SQLite database with every table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
