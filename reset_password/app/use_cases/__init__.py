"""
Use Cases

- reset/: Password reset token flows
"""

from .reset import (
    GenerateResetTokenUseCase,
    RedeemResetTokenUseCase,
    RemoveExpiredRequestsUseCase,
)

__all__ = [
    "GenerateResetTokenUseCase",
    "RedeemResetTokenUseCase",
    "RemoveExpiredRequestsUseCase",
]
