from reset_password.app.services.reset_request_store import ResetRequestStore
from reset_password.libs.result import Result, Return
from .dtos import RemoveExpiredResponse


class RemoveExpiredRequestsUseCase:
    """Deletes every expired reset request; meant for a periodic job"""

    def __init__(self, store: ResetRequestStore):
        self.store = store

    async def execute(self) -> Result[RemoveExpiredResponse]:
        removed = await self.store.remove_expired()
        return Return.ok(RemoveExpiredResponse(removed=removed))
