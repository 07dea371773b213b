"""
ProfessionalProfile Entity

Role payload of credentialed professional (doctor) accounts.
"""

from typing import List, Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .user import User


class ProfessionalProfile(SQLModel, table=True):
    """
    ProfessionalProfile entity - credentials of a professional account.

    Business Rules:
    - Registration number unique among professionals; NULLs are exempt
      (SQL UNIQUE ignores NULL)
    - Starts unverified
    """

    __tablename__ = "professional_profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)

    reg_number: Optional[str] = Field(default=None, unique=True, index=True, max_length=64)
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    hospital: Optional[str] = None
    experience: Optional[int] = None
    languages: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    photo: Optional[str] = None

    verified: bool = Field(default=False)

    video_consultation_fee: Optional[float] = None
    in_person_fee: Optional[float] = None

    user: Optional["User"] = Relationship(back_populates="professional_profile")
