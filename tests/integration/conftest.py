from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.clock import FrozenClock
from reset_password.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from reset_password.app.services.config import ResetRequestStoreConfig
from reset_password.app.services.reset_request_store import ResetRequestStore
from reset_password.domain.entities import ResetRequest  # noqa: F401


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture
def store_config():
    return ResetRequestStoreConfig(
        token_lifetime=timedelta(hours=1),
        signing_key="integration-test-key",
        request_throttle_limit=timedelta(minutes=15),
    )


@pytest_asyncio.fixture
async def make_store(session_factory, store_config, clock):
    """Builds stores that each own a separate session, like separate callers"""
    sessions = []

    def _make_store():
        session = session_factory()
        sessions.append(session)
        return ResetRequestStore(SqlAlchemyUnitOfWork(session), store_config, clock=clock)

    yield _make_store

    for session in sessions:
        await session.close()


@pytest.fixture
def store(make_store):
    return make_store()
