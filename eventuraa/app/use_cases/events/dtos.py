"""
Event Use Case DTOs (Data Transfer Objects)

Drafts arrive loosely typed so that validation can report every bad field
at once. Fields outside the models (approvalStatus, sold, organizerId, ...)
are dropped on parse and can never reach an Event.
"""

from datetime import date as Date
from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.domain.entities import Event, Reservation, TicketTier


# ============================================================================
# Commands
# ============================================================================


class TicketTierDraft(CamelModel):
    name: Optional[str] = None
    price: Any = None
    quantity: Any = None


class EventDraft(CamelModel):
    """Event as submitted by an organizer"""

    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Any = Field(default=None, alias="date")
    time: Optional[str] = None
    location: Optional[str] = None
    category: Optional[str] = None
    images: List[str] = []
    published: Optional[bool] = None
    tickets: Optional[List[TicketTierDraft]] = None


class EventChanges(EventDraft):
    """
    Partial update. Only fields present in the request are applied; the
    model's fields are the update allow-list.
    """


# ============================================================================
# Responses
# ============================================================================


class TicketTierInfo(CamelModel):
    id: str
    name: str
    price: float
    quantity: int
    sold: int
    available: int


class EventInfo(CamelModel):
    id: str
    title: str
    description: str
    event_date: Date = Field(alias="date")
    time: str
    location: str
    category: str
    images: List[str]
    published: bool
    approval_status: str
    admin_feedback: str
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    organizer_id: str
    created_at: datetime
    updated_at: datetime
    tickets: List[TicketTierInfo]


def to_tier_info(tier: TicketTier) -> TicketTierInfo:
    return TicketTierInfo(
        id=str(tier.id),
        name=tier.name,
        price=tier.price,
        quantity=tier.quantity,
        sold=tier.sold,
        available=tier.available,
    )


def to_event_info(event: Event) -> EventInfo:
    return EventInfo(
        id=str(event.id),
        title=event.title,
        description=event.description,
        event_date=event.event_date,
        time=event.time,
        location=event.location,
        category=event.category.value,
        images=list(event.images or []),
        published=event.published,
        approval_status=event.approval_status.value,
        admin_feedback=event.admin_feedback,
        reviewed_by=str(event.reviewed_by) if event.reviewed_by else None,
        reviewed_at=event.reviewed_at,
        organizer_id=str(event.organizer_id),
        created_at=event.created_at,
        updated_at=event.updated_at,
        tickets=[to_tier_info(tier) for tier in event.tickets],
    )


class EventResponse(CamelModel):
    success: bool = True
    event: EventInfo


class EventListResponse(CamelModel):
    success: bool = True
    count: int
    events: List[EventInfo]


class PendingEventsResponse(CamelModel):
    success: bool = True
    events: List[EventInfo]
    page: int
    page_size: int
    total: int
    total_pages: int


class DeleteEventResponse(CamelModel):
    success: bool = True
    message: str


class ReservationInfo(CamelModel):
    id: str
    event_id: str
    tier_name: str
    count: int
    unit_price: float
    total_price: float
    created_at: datetime


def to_reservation_info(reservation: Reservation) -> ReservationInfo:
    return ReservationInfo(
        id=str(reservation.id),
        event_id=str(reservation.event_id),
        tier_name=reservation.tier_name,
        count=reservation.count,
        unit_price=reservation.unit_price,
        total_price=reservation.total_price,
        created_at=reservation.created_at,
    )


class ReservationResponse(CamelModel):
    success: bool = True
    reservation: ReservationInfo
    tier: TicketTierInfo
