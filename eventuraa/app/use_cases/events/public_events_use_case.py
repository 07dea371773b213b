"""
Public Event Use Cases

Anonymous reads. Only approved and published events exist here.
"""

from typing import Optional
from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError, validation_failed
from eventuraa.domain.entities import ApprovalStatus, Event, EventCategory
from eventuraa.libs.result import Result, Return
from .dtos import EventListResponse, EventResponse, to_event_info
from .update_event_use_case import event_not_found
from .validation import CATEGORIES


def is_publicly_visible(event: Event) -> bool:
    return event.approval_status == ApprovalStatus.approved and event.published


class ListPublicEventsUseCase:
    """Approved + published events, latest event date first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, category: Optional[str] = None) -> Result[EventListResponse]:
        if category is not None and category not in CATEGORIES:
            return Return.err(
                validation_failed(
                    [FieldError(param="category", msg=f"Category must be one of: {', '.join(CATEGORIES)}")]
                )
            )

        async with self.uow:
            events = await self.uow.events.list_public(
                EventCategory(category) if category else None
            )
            infos = [to_event_info(event) for event in events]
            return Return.ok(EventListResponse(count=len(infos), events=infos))


class GetPublicEventUseCase:
    """Single event; anything not publicly visible reads as not found"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or not is_publicly_visible(event):
                return Return.err(event_not_found())
            return Return.ok(EventResponse(event=to_event_info(event)))
