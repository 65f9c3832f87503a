"""Service test fixtures - async DB, registry service and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database and a fresh Registry
    - get_registry_service and get_settings overridden for route tests
    - db_manager / registry_service module singletons patched for the health probes

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for store and route tests
    - DatabaseSessionManager built via __new__: the real constructor passes pool sizing
      that SQLite's static pool does not accept
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.core.registry import Registry
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.main import app
from app.services.registry_service import RegistryService, get_registry_service
from app.services.registry_store import SqlRegistryStore
import app.infrastructure.database as db_module
import app.services.registry_service as service_module

from tests.services.registry_fakes import OPERATOR_KEY, FIXED_NOW, RecordingSink


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

@pytest.fixture
def test_db_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager

@pytest.fixture
def store(test_db_manager):
    return SqlRegistryStore(test_db_manager)

@pytest.fixture
def sink():
    return RecordingSink()

@pytest.fixture
def service(store, sink):
    return RegistryService(Registry(sink=sink, clock=lambda: FIXED_NOW), store)

@pytest.fixture
def operator_headers():
    return {"X-Operator-Key": OPERATOR_KEY}

@pytest.fixture
async def client(service, test_db_manager):
    """FastAPI test client wired to the test registry service."""
    app.dependency_overrides[get_registry_service] = lambda: service
    app.dependency_overrides[get_settings] = lambda: Settings(operator_key=OPERATOR_KEY)

    original_manager = db_module.db_manager
    original_service = service_module.registry_service
    db_module.db_manager = test_db_manager
    service_module.registry_service = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    service_module.registry_service = original_service
