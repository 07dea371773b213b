"""
Event Use Cases

Event lifecycle: organizer drafts, admin review, public reads and ticket
reservations.
"""

from .create_event_use_case import CreateEventUseCase
from .update_event_use_case import UpdateEventUseCase
from .delete_event_use_case import DeleteEventUseCase
from .review_event_use_case import ReviewEventUseCase
from .public_events_use_case import ListPublicEventsUseCase, GetPublicEventUseCase
from .organizer_events_use_case import ListOrganizerEventsUseCase, GetOrganizerEventUseCase
from .admin_events_use_case import (
    ListAllEventsUseCase,
    GetEventForAdminUseCase,
    ListPendingEventsUseCase,
)
from .reserve_tickets_use_case import ReserveTicketsUseCase
from .dtos import (
    EventDraft,
    EventChanges,
    TicketTierDraft,
    EventInfo,
    TicketTierInfo,
    EventResponse,
    EventListResponse,
    PendingEventsResponse,
    DeleteEventResponse,
    ReservationInfo,
    ReservationResponse,
)

__all__ = [
    # Use Cases
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "ReviewEventUseCase",
    "ListPublicEventsUseCase",
    "GetPublicEventUseCase",
    "ListOrganizerEventsUseCase",
    "GetOrganizerEventUseCase",
    "ListAllEventsUseCase",
    "GetEventForAdminUseCase",
    "ListPendingEventsUseCase",
    "ReserveTicketsUseCase",
    # DTOs - Commands
    "EventDraft",
    "EventChanges",
    "TicketTierDraft",
    # DTOs - Responses
    "EventInfo",
    "TicketTierInfo",
    "EventResponse",
    "EventListResponse",
    "PendingEventsResponse",
    "DeleteEventResponse",
    "ReservationInfo",
    "ReservationResponse",
]
