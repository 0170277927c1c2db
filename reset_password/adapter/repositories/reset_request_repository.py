from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from reset_password.app.repositories.reset_request_repository import IResetRequestRepository
from reset_password.domain.entities import ResetRequest


class ResetRequestRepository(IResetRequestRepository):
    """ResetRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, request: ResetRequest) -> ResetRequest:
        """Persist a new reset request"""
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def find_by_selector(self, selector: str) -> Optional[ResetRequest]:
        """Get reset request by its public selector"""
        stmt = select(ResetRequest).where(ResetRequest.selector == selector)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self) -> List[ResetRequest]:
        """Get every stored reset request, oldest first"""
        stmt = select(ResetRequest).order_by(ResetRequest.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_most_recent_non_expired(
        self, user_id: str, now: datetime
    ) -> Optional[ResetRequest]:
        """
        Get the newest request of a user that has not expired at `now`.

        Requests sharing the same requested_at are ordered by id, so the
        most recently inserted one wins.
        """
        stmt = (
            select(ResetRequest)
            .where(ResetRequest.user_id == user_id, ResetRequest.expires_at > now)
            .order_by(ResetRequest.requested_at.desc(), ResetRequest.id.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_non_expired(self, user_id: str, now: datetime) -> int:
        """Count requests of a user that have not expired at `now`"""
        stmt = select(func.count(ResetRequest.id)).where(
            ResetRequest.user_id == user_id, ResetRequest.expires_at > now
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete(self, request_id: int) -> bool:
        """
        Delete a request by id.

        The affected row count tells concurrent callers apart: only the one
        whose DELETE actually removed the row gets True.
        """
        stmt = delete(ResetRequest).where(ResetRequest.id == request_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_where_expired(self, now: datetime) -> int:
        """Delete every request with expires_at <= now"""
        stmt = delete(ResetRequest).where(ResetRequest.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete every request of a user"""
        stmt = delete(ResetRequest).where(ResetRequest.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
