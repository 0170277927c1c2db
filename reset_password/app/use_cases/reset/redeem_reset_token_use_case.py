"""
Redeem Reset Token Use Case

Validates a full reset token and returns the user it belongs to.
"""

from reset_password.app.errors import INVALID_TOKEN
from reset_password.app.services.reset_request_store import ResetRequestStore
from reset_password.libs.result import Error, Result, Return


class RedeemResetTokenUseCase:
    """
    Use case for redeeming a password reset token.

    Business Rules:
    - Token must be exactly selector_length + verifier_length characters
    - First selector_length characters are the selector, the rest the verifier
    - The request is deleted once redeemed
    """

    def __init__(self, store: ResetRequestStore):
        self.store = store
        self.config = store.config

    async def execute(self, token: str) -> Result[str]:
        """
        Execute redeem reset token use case.

        Args:
            token: Full reset token (plain text from email)

        Returns:
            Result with the user id, or Error

        Errors:
            - INVALID_TOKEN: Malformed token or verifier mismatch
            - TOKEN_EXPIRED: Token has expired
            - NOT_FOUND: No request for the selector
        """
        selector_length = self.config.selector_length
        if not token or len(token) != selector_length + self.config.verifier_length:
            return Return.err(Error(INVALID_TOKEN, "Invalid reset token"))

        selector, verifier = token[:selector_length], token[selector_length:]
        return await self.store.consume(selector, verifier)
