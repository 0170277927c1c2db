"""
Generate Reset Token Use Case

Issues a full reset token (selector + verifier) for a user.
"""

import logging

from reset_password.app.errors import TOO_MANY_REQUESTS
from reset_password.app.services.reset_request_store import ResetRequestStore
from reset_password.libs.result import Error, Result, Return
from .dtos import ResetPasswordToken

logger = logging.getLogger(__name__)


class GenerateResetTokenUseCase:
    """
    Use case for generating a password reset token.

    Business Rules:
    - Expired requests are garbage collected first when enabled
    - Throttled: a new request is refused while the user's most recent
      live request is younger than the throttle limit
    - The returned token is selector + verifier; only the hash is stored
    """

    def __init__(self, store: ResetRequestStore):
        self.store = store
        self.config = store.config

    async def execute(self, user_id: str) -> Result[ResetPasswordToken]:
        """
        Execute generate reset token use case.

        Args:
            user_id: Identifier of the user asking for a reset

        Returns:
            Result with the full token, or Error

        Errors:
            - TOO_MANY_REQUESTS: A request was made within the throttle limit;
              details carry `available_at` and `retry_after` (seconds)
        """
        if self.config.enable_garbage_collection:
            await self.store.remove_expired()

        last_requested_at = await self.store.most_recent_non_expired_for(user_id)
        if last_requested_at is not None:
            available_at = last_requested_at + self.config.request_throttle_limit
            now = self.store.now()
            if available_at > now:
                logger.info(f"Reset request throttled for user_id={user_id}")
                return Return.err(
                    Error(
                        TOO_MANY_REQUESTS,
                        "Too many password reset requests, try again later",
                        details={
                            "available_at": available_at,
                            "retry_after": int((available_at - now).total_seconds()),
                        },
                    )
                )

        created = await self.store.create(user_id)

        return Return.ok(
            ResetPasswordToken(
                token=created.selector + created.verifier,
                expires_at=created.expires_at,
                generated_at=created.requested_at,
            )
        )

    def generate_fake_token(self) -> ResetPasswordToken:
        """
        Token shaped like a real one, backed by nothing.

        Lets callers answer identically whether or not the user exists.
        """
        generator = self.store.token_generator
        now = self.store.now()
        return ResetPasswordToken(
            token=generator.generate_selector() + generator.generate_verifier(),
            expires_at=now + self.config.token_lifetime,
            generated_at=now,
        )
