"""
OrganizerProfile Entity

Role payload of organizer accounts.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Relationship, SQLModel

from eventuraa.domain.base import utcnow

if TYPE_CHECKING:
    from .user import User


class OrganizerProfile(SQLModel, table=True):
    """
    OrganizerProfile entity - company details of an organizer account.

    Business Rules:
    - Exactly one per organizer user
    - Starts unverified; only an admin flips `verified`
    - Unverified organizers cannot manage events
    """

    __tablename__ = "organizer_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)

    company: str = Field(max_length=255)
    description: Optional[str] = None
    website: Optional[str] = Field(default=None, max_length=255)
    profile_image: Optional[str] = None
    social: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    verified: bool = Field(default=False)
    member_since: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    user: Optional["User"] = Relationship(back_populates="organizer_profile")
