"""
ResetRequest Entity

Persisted password reset requests.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class ResetRequest(SQLModel, table=True):
    """
    ResetRequest entity - one outstanding password reset request.

    Business Rules:
    - Selector is public and unique, used to look the request up
    - Only a keyed hash of the verifier is stored, never the verifier itself
    - expires_at = requested_at + configured lifetime
    - Single-use: deleted once the verifier has been redeemed
    - Expired requests stay stored until cleanup removes them
    """

    __tablename__ = "reset_password_requests"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Opaque reference to a user owned by another system
    user_id: str = Field(max_length=255)
    selector: str = Field(max_length=100, unique=True)
    hashed_verifier: str = Field(max_length=100)

    # Timestamps
    requested_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_reset_request_user_id", "user_id"),
        Index("idx_reset_request_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
