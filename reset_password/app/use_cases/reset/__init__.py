"""
Reset Use Cases

Token issuing, redemption and cleanup built on the reset request store.
"""

from .generate_reset_token_use_case import GenerateResetTokenUseCase
from .redeem_reset_token_use_case import RedeemResetTokenUseCase
from .remove_expired_requests_use_case import RemoveExpiredRequestsUseCase
from .dtos import ResetPasswordToken, RemoveExpiredResponse

__all__ = [
    # Use Cases
    "GenerateResetTokenUseCase",
    "RedeemResetTokenUseCase",
    "RemoveExpiredRequestsUseCase",
    # DTOs - Responses
    "ResetPasswordToken",
    "RemoveExpiredResponse",
]
