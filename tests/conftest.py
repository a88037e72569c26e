"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient

from pystock.core.settings import Settings
from pystock.db.session import createEngine, createSessionMaker, init_db
from pystock.pystock import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file in tmp_path."""
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'stocks.db'}")


@pytest.fixture
def client(settings):
    """TestClient with the lifespan (pool + schema) running."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
async def session(settings):
    """AsyncSession on an initialised database, for data access tests."""
    engine = createEngine(settings)
    await init_db(engine)
    async with createSessionMaker(engine)() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture
def stock_payload():
    """Factory fixture, call with overrides to get a request body."""
    def _make(**overrides):
        payload = {"name": "Tesla", "price": 900, "company": "Tesla Inc"}
        payload.update(overrides)
        return payload
    return _make
