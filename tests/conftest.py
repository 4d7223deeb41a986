import pytest
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from starlette.testclient import TestClient

from company_stocks.database.connection import get_db
from company_stocks.database.db_models import Base
from company_stocks.gateway.app import app


@pytest.fixture
def session_factory(tmp_path) -> async_sessionmaker[AsyncSession]:
    """
    Creates a session factory for a fresh SQLite database with all tables.

    The database lives in a file so every connection sees the same data, and
    connections aren't pooled so sessions can be used from any event loop.
    """
    db_path = tmp_path / "companies.db"

    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool
    )
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def test_client(session_factory):
    """Creates a test client backed by the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
