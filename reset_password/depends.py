from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from reset_password.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from reset_password.app.services.config import ResetRequestStoreConfig
from reset_password.app.services.reset_request_store import ResetRequestStore
from reset_password.config import ApplicationConfig


def create_engine(db_uri: str = None):
    return create_async_engine(db_uri or ApplicationConfig.DB_URI, echo=False, future=True)


def create_session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


def get_store_config() -> ResetRequestStoreConfig:
    return ResetRequestStoreConfig.from_application_config(ApplicationConfig)


@asynccontextmanager
async def get_unit_of_work(session_factory):
    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def get_reset_request_store(session_factory, config: ResetRequestStoreConfig = None):
    async with get_unit_of_work(session_factory) as uow:
        yield ResetRequestStore(uow, config or get_store_config())
