"""
Reset Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime, timedelta

from pydantic import BaseModel


class ResetPasswordToken(BaseModel):
    """Full token handed to the user: selector followed by verifier"""

    token: str
    expires_at: datetime
    generated_at: datetime

    def lifetime(self) -> timedelta:
        return self.expires_at - self.generated_at


class RemoveExpiredResponse(BaseModel):
    """Response for remove expired requests use case"""

    removed: int
