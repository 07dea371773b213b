"""
PasswordResetToken Entity

One outstanding password reset per row, addressed by the SHA-256 of the
random value that was handed to the user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from eventuraa.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    Business Rules:
    - Valid until expires_at (PASSWORD_RESET_TTL_MINUTES after issue)
    - Single-use: used flips once, on confirmation or when a newer token
      is requested for the same user
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id")
    token_hash: str = Field(max_length=64)

    used: bool = Field(default=False)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))

    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("ix_reset_token_hash", "token_hash", unique=True),
        Index("ix_reset_token_user_used", "user_id", "used"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at < (now or utcnow())
