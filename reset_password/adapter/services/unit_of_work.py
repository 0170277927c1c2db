import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from reset_password.adapter.repositories.reset_request_repository import ResetRequestRepository
from reset_password.app.errors import STORAGE_ERROR, StorageError
from reset_password.app.services.unit_of_work import UnitOfWork
from reset_password.libs.result import Error

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of UnitOfWork pattern.

    Anything not committed inside the `async with` block is rolled back on
    exit. Loaded entities are detached first so they stay readable once the
    rollback has expired the session. SQLAlchemy failures raised inside the
    block (or by the rollback itself) are re-raised as StorageError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.reset_requests = ResetRequestRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            self.session.expunge_all()
            await self.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(f"Rollback failed: {rollback_exc.__class__.__name__}")
            if exc is None:
                exc = rollback_exc

        if isinstance(exc, SQLAlchemyError):
            logger.error(f"Storage failure: {exc.__class__.__name__}")
            raise StorageError(
                Error(STORAGE_ERROR, "Reset request storage is unavailable")
            ) from exc

        return False

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
