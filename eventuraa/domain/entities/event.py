"""
Event and TicketTier Entities

An event owned by one organizer, gated by admin approval, selling tickets
through an ordered list of tiers.
"""

from datetime import date as Date
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import JSON, Column, DateTime, Field, Index, Relationship, SQLModel

from eventuraa.domain.base import utcnow
from .enums import ApprovalStatus, EventCategory


class Event(SQLModel, table=True):
    """
    Event entity - the approval state machine.

    Business Rules:
    - Always created pending; only an admin moves it to approved/rejected
    - No transition back to pending
    - organizer_id is immutable; only that organizer edits or deletes
    - Public reads see approved + published events only
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    title: str = Field(max_length=100)
    description: str = Field(max_length=5000)
    event_date: Date
    time: str = Field(max_length=20)
    location: str = Field(max_length=255)
    category: EventCategory
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    published: bool = Field(default=True)

    # Approval workflow
    approval_status: ApprovalStatus = Field(default=ApprovalStatus.pending)
    admin_feedback: str = Field(default="")
    reviewed_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
    reviewed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    organizer_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    tickets: List["TicketTier"] = Relationship(
        back_populates="event",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "order_by": "TicketTier.position",
            "cascade": "all, delete-orphan",
        },
    )

    __table_args__ = (
        Index("idx_event_approval_status", "approval_status"),
        Index("idx_event_created_at", "created_at"),
    )

    def find_tier(self, name: str) -> Optional["TicketTier"]:
        for tier in self.tickets:
            if tier.name == name:
                return tier
        return None


class TicketTier(SQLModel, table=True):
    """
    TicketTier entity - one price level of an event.

    Business Rules:
    - price >= 0, quantity >= 1
    - sold starts at 0 and never exceeds quantity; it only moves through
      the conditional increment in TicketTierRepository
    """

    __tablename__ = "ticket_tiers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    position: int = Field(default=0)

    name: str = Field(max_length=100)
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)
    sold: int = Field(default=0)

    event: Optional[Event] = Relationship(back_populates="tickets")

    __table_args__ = (
        CheckConstraint("sold >= 0 AND sold <= quantity", name="ck_ticket_tier_sold"),
    )

    @property
    def available(self) -> int:
        return self.quantity - self.sold
