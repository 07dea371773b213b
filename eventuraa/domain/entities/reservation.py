"""
Reservation Entity

Record of tickets taken from a tier.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from eventuraa.domain.base import utcnow


class Reservation(SQLModel, table=True):
    """
    Reservation entity - a successful reserve() call.

    Business Rules:
    - Only written after the tier's sold counter was incremented
    - Prices are snapshots taken at reservation time
    - Kept when the event is deleted (sales history), hence no foreign keys
    """

    __tablename__ = "reservations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(index=True)
    tier_id: UUID
    tier_name: str = Field(max_length=100)
    user_id: UUID = Field(index=True)

    count: int = Field(ge=1)
    unit_price: float
    total_price: float

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_reservation_event_tier", "event_id", "tier_id"),)
