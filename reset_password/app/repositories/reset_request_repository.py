from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from reset_password.domain.entities import ResetRequest


class IResetRequestRepository(ABC):
    """ResetRequest repository interface - application layer"""

    @abstractmethod
    async def save(self, request: ResetRequest) -> ResetRequest:
        """Persist a new reset request"""
        pass

    @abstractmethod
    async def find_by_selector(self, selector: str) -> Optional[ResetRequest]:
        """Get reset request by its public selector"""
        pass

    @abstractmethod
    async def find_all(self) -> List[ResetRequest]:
        """Get every stored reset request, oldest first"""
        pass

    @abstractmethod
    async def find_most_recent_non_expired(
        self, user_id: str, now: datetime
    ) -> Optional[ResetRequest]:
        """Get the newest request of a user that has not expired at `now`"""
        pass

    @abstractmethod
    async def count_non_expired(self, user_id: str, now: datetime) -> int:
        """Count requests of a user that have not expired at `now`"""
        pass

    @abstractmethod
    async def delete(self, request_id: int) -> bool:
        """Delete a request by id, returns False if it was already gone"""
        pass

    @abstractmethod
    async def delete_where_expired(self, now: datetime) -> int:
        """Delete every request with expires_at <= now"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: str) -> int:
        """Delete every request of a user"""
        pass
