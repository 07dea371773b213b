"""
Update Event Use Case

Applies an organizer's allow-listed changes to one of their own events.
"""

from typing import List
from uuid import UUID

from eventuraa.app.repositories.errors import ConstraintViolationError
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError, validation_failed
from eventuraa.domain.base import utcnow
from eventuraa.domain.entities import AuditEvent, Event, EventCategory, TicketTier
from eventuraa.libs.result import Error, Result, Return
from .dtos import EventChanges, EventResponse, TicketTierDraft, to_event_info
from .validation import parse_event_date, validate_changes


def event_not_found() -> Error:
    return Error("EVENT_NOT_FOUND", "Event not found")


def not_event_owner() -> Error:
    return Error("NOT_EVENT_OWNER", "You are not authorized to manage this event")


def _merge_tickets(event: Event, drafts: List[TicketTierDraft], errors: List[FieldError]) -> List[TicketTier]:
    """
    Build the new tier list. Tiers matched by name keep their id and sold
    counter; a quantity below sold, or dropping a tier with sales, is an
    error.
    """
    merged = []
    kept_names = set()
    for position, draft in enumerate(drafts):
        name = draft.name.strip()
        price = float(draft.price)
        quantity = int(draft.quantity)
        kept_names.add(name)
        tier = event.find_tier(name)
        if tier is None:
            tier = TicketTier(event_id=event.id, name=name, price=price, quantity=quantity, sold=0)
        elif quantity < tier.sold:
            errors.append(
                FieldError(
                    param=f"tickets[{position}].quantity",
                    msg=f"Quantity cannot be less than the {tier.sold} tickets already sold",
                )
            )
            continue
        tier.position = position
        tier.price = price
        tier.quantity = quantity
        merged.append(tier)

    for tier in event.tickets:
        if tier.name not in kept_names and tier.sold > 0:
            errors.append(
                FieldError(
                    param="tickets",
                    msg=f"Ticket type '{tier.name}' has sales and cannot be removed",
                )
            )
    return merged


class UpdateEventUseCase:
    """
    Use case for updating an event.

    Business Rules:
    - Missing event is EVENT_NOT_FOUND; ownership is checked before any change
    - Only title, description, date, time, location, category, images,
      published and tickets can change
    - approval_status, organizer and sold counters are never taken from input
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, event_id: UUID, caller_id: UUID, changes: EventChanges
    ) -> Result[EventResponse]:
        fields = set(changes.model_fields_set)

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(event_not_found())
            if event.organizer_id != caller_id:
                return Return.err(not_event_owner())

            errors = validate_changes(changes, fields)
            if errors:
                return Return.err(validation_failed(errors))

            tickets = None
            if "tickets" in fields:
                tickets = _merge_tickets(event, changes.tickets, errors)
                if errors:
                    return Return.err(validation_failed(errors))

            if "title" in fields:
                event.title = changes.title.strip()
            if "description" in fields:
                event.description = changes.description
            if "event_date" in fields:
                event.event_date = parse_event_date(changes.event_date)
            if "time" in fields:
                event.time = changes.time.strip()
            if "location" in fields:
                event.location = changes.location.strip()
            if "category" in fields:
                event.category = EventCategory(changes.category)
            if "images" in fields:
                event.images = list(changes.images)
            if "published" in fields:
                event.published = changes.published
            if tickets is not None:
                event.tickets = tickets

            event.updated_at = utcnow()
            try:
                event = await self.uow.events.update(event)
            except ConstraintViolationError:
                # Tickets were sold between the read and the write
                return Return.err(
                    validation_failed(
                        [
                            FieldError(
                                param="tickets",
                                msg="Tickets were sold while saving; quantity cannot be less than tickets already sold",
                            )
                        ]
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=caller_id,
                    action="event_updated",
                    event_metadata={
                        "event_id": str(event.id),
                        "fields": sorted(fields),
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(EventResponse(event=to_event_info(event)))
