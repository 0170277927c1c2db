"""
Reset Password Domain Entities
"""

from .reset_request import ResetRequest

__all__ = [
    "ResetRequest",
]
