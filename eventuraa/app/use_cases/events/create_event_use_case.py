"""
Create Event Use Case

Stores a new event for a verified organizer, always awaiting review.
"""

from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import validation_failed
from eventuraa.domain.entities import (
    ApprovalStatus,
    AuditEvent,
    Event,
    EventCategory,
    TicketTier,
)
from eventuraa.libs.result import Result, Return
from .dtos import EventDraft, EventResponse, to_event_info
from .validation import parse_event_date, validate_draft


class CreateEventUseCase:
    """
    Use case for creating an event.

    Business Rules:
    - Caller is a verified organizer (enforced by the API guard)
    - All field errors are reported together
    - approval_status is always pending and every tier starts with sold = 0,
      whatever the draft says
    - Tiers keep the order in which they were submitted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organizer_id: UUID, draft: EventDraft) -> Result[EventResponse]:
        errors = validate_draft(draft)
        if errors:
            return Return.err(validation_failed(errors))

        async with self.uow:
            event = Event(
                title=draft.title.strip(),
                description=draft.description,
                event_date=parse_event_date(draft.event_date),
                time=draft.time.strip(),
                location=draft.location.strip(),
                category=EventCategory(draft.category),
                images=list(draft.images),
                published=True if draft.published is None else draft.published,
                approval_status=ApprovalStatus.pending,
                organizer_id=organizer_id,
            )
            event.tickets = [
                TicketTier(
                    event_id=event.id,
                    position=position,
                    name=tier.name.strip(),
                    price=float(tier.price),
                    quantity=int(tier.quantity),
                    sold=0,
                )
                for position, tier in enumerate(draft.tickets)
            ]
            event = await self.uow.events.create(event)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=organizer_id,
                    action="event_created",
                    event_metadata={"event_id": str(event.id), "title": event.title},
                )
            )
            await self.uow.commit()

            return Return.ok(EventResponse(event=to_event_info(event)))
