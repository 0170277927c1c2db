"""
Reset Request Store

Creates, looks up, redeems and expires password reset requests.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel

from reset_password.app.errors import INVALID_TOKEN, NOT_FOUND, TOKEN_EXPIRED
from reset_password.app.services.config import ResetRequestStoreConfig
from reset_password.app.services.token_generator import TokenGenerator
from reset_password.app.services.unit_of_work import UnitOfWork
from reset_password.domain.base import utcnow
from reset_password.domain.entities import ResetRequest
from reset_password.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


def _check_user_id(user_id: str) -> str:
    """User ids are stored as text; anything else would come back changed."""
    if not isinstance(user_id, str):
        raise TypeError(
            f"user_id must be a str, got {type(user_id).__name__}; convert it before calling"
        )
    return user_id


class CreatedResetRequest(BaseModel):
    """Selector and raw verifier of a freshly created request"""

    selector: str
    verifier: str
    requested_at: datetime
    expires_at: datetime


class ResetRequestStore:
    """
    Store for password reset requests.

    Business Rules:
    - The raw verifier is returned once by create() and never persisted
    - Expired requests are reported as TOKEN_EXPIRED and kept until
      remove_expired() deletes them
    - A successfully consumed request is deleted (single use); of two
      concurrent consumers only one gets the user id back
    - Storage failures raise StorageError (from the unit of work)
    - User ids must be str; consume() hands back exactly the id given to create()
    """

    def __init__(
        self,
        uow: UnitOfWork,
        config: ResetRequestStoreConfig,
        token_generator: Optional[TokenGenerator] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.config = config
        self.token_generator = token_generator or TokenGenerator(
            config.signing_key,
            selector_length=config.selector_length,
            verifier_length=config.verifier_length,
        )
        self.clock = clock

    def now(self) -> datetime:
        return self.clock()

    async def create(self, user_id: str) -> CreatedResetRequest:
        """
        Create and persist a new reset request for a user.

        Args:
            user_id: Identifier of the user asking for a reset

        Returns:
            CreatedResetRequest holding the selector and the raw verifier
        """
        _check_user_id(user_id)
        # Whole seconds, so backends that round fractional DATETIMEs keep the hash valid
        requested_at = self.now().replace(microsecond=0)
        expires_at = requested_at + self.config.token_lifetime

        selector = self.token_generator.generate_selector()
        verifier = self.token_generator.generate_verifier()

        request = ResetRequest(
            user_id=user_id,
            selector=selector,
            hashed_verifier=self.token_generator.hash_verifier(verifier, user_id, expires_at),
            requested_at=requested_at,
            expires_at=expires_at,
        )

        async with self.uow:
            await self.uow.reset_requests.save(request)
            await self.uow.commit()

        logger.info(f"Reset request created: selector={selector} user_id={user_id}")

        return CreatedResetRequest(
            selector=selector,
            verifier=verifier,
            requested_at=requested_at,
            expires_at=expires_at,
        )

    async def find(self, selector: str) -> Result[ResetRequest]:
        async with self.uow:
            request = await self.uow.reset_requests.find_by_selector(selector)

        if request is None:
            return Return.err(Error(NOT_FOUND, "Reset request not found"))
        return Return.ok(request)

    async def consume(self, selector: str, verifier: str) -> Result[str]:
        """
        Redeem a selector/verifier pair.

        Returns:
            Result with the user id, or Error

        Errors:
            - NOT_FOUND: No request for the selector (or it was consumed concurrently)
            - TOKEN_EXPIRED: Request is past its lifetime, left in place for cleanup
            - INVALID_TOKEN: Verifier does not match, request left intact
        """
        now = self.now()

        async with self.uow:
            request = await self.uow.reset_requests.find_by_selector(selector)

            if request is None:
                logger.warning(f"Reset request not found: selector={selector}")
                return Return.err(Error(NOT_FOUND, "Reset request not found"))

            if request.is_expired(now):
                logger.warning(f"Reset request expired: selector={selector}")
                return Return.err(Error(TOKEN_EXPIRED, "Reset request has expired"))

            if not self.token_generator.verify(
                verifier, request.user_id, request.expires_at, request.hashed_verifier
            ):
                logger.warning(f"Invalid verifier for reset request: selector={selector}")
                return Return.err(Error(INVALID_TOKEN, "Invalid reset token"))

            # Compare-and-delete: a concurrent consumer may have removed it already
            deleted = await self.uow.reset_requests.delete(request.id)
            if not deleted:
                logger.warning(f"Reset request already consumed: selector={selector}")
                return Return.err(Error(NOT_FOUND, "Reset request not found"))

            user_id = request.user_id
            await self.uow.commit()

        logger.info(f"Reset request consumed: selector={selector} user_id={user_id}")
        return Return.ok(user_id)

    async def most_recent_non_expired_for(self, user_id: str) -> Optional[datetime]:
        """requested_at of the user's newest live request, or None"""
        async with self.uow:
            request = await self.uow.reset_requests.find_most_recent_non_expired(
                _check_user_id(user_id), self.now()
            )
            return request.requested_at if request is not None else None

    async def count_non_expired_for(self, user_id: str) -> int:
        async with self.uow:
            return await self.uow.reset_requests.count_non_expired(
                _check_user_id(user_id), self.now()
            )

    async def remove(self, request: ResetRequest) -> None:
        """Delete a request; removing one that is already gone is a no-op"""
        async with self.uow:
            await self.uow.reset_requests.delete(request.id)
            await self.uow.commit()

    async def remove_all_for(self, user_id: str) -> int:
        async with self.uow:
            removed = await self.uow.reset_requests.delete_by_user_id(_check_user_id(user_id))
            await self.uow.commit()

        logger.info(f"Removed {removed} reset request(s) for user_id={user_id}")
        return removed

    async def remove_expired(self) -> int:
        """Delete every request with expires_at <= now, returns how many went"""
        async with self.uow:
            removed = await self.uow.reset_requests.delete_where_expired(self.now())
            await self.uow.commit()

        logger.info(f"Removed {removed} expired reset request(s)")
        return removed
