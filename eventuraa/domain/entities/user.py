"""
User Entity

One account per email. The role is the tag of a tagged variant: organizer
and professional accounts carry their payload in a per-role profile table.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from eventuraa.domain.base import utcnow
from .enums import UserRole

if TYPE_CHECKING:
    from .organizer_profile import OrganizerProfile
    from .professional_profile import ProfessionalProfile


class User(SQLModel, table=True):
    """
    User entity - an identity that can sign in.

    Business Rules:
    - Email must be unique across all users, regardless of role (exact match)
    - Password stored as bcrypt hash, never returned
    - Role is immutable after signup
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    phone: Optional[str] = Field(default=None, max_length=20)

    role: UserRole = Field(default=UserRole.user)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Role payloads (at most one is present, matching the role)
    organizer_profile: Optional["OrganizerProfile"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"lazy": "selectin", "uselist": False}
    )
    professional_profile: Optional["ProfessionalProfile"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"lazy": "selectin", "uselist": False}
    )

    __table_args__ = (Index("idx_user_role", "role"),)

    @property
    def profile(self):
        """The profile matching the role, or None for roles without one"""
        if self.role == UserRole.organizer:
            return self.organizer_profile
        if self.role == UserRole.professional:
            return self.professional_profile
        return None
