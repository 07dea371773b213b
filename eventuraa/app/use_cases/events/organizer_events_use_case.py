"""
Organizer Event Use Cases

An organizer's own events in every approval status.
"""

from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.libs.result import Result, Return
from .dtos import EventListResponse, EventResponse, to_event_info
from .update_event_use_case import event_not_found, not_event_owner


class ListOrganizerEventsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organizer_id: UUID) -> Result[EventListResponse]:
        async with self.uow:
            events = await self.uow.events.list_by_organizer(organizer_id)
            infos = [to_event_info(event) for event in events]
            return Return.ok(EventListResponse(count=len(infos), events=infos))


class GetOrganizerEventUseCase:
    """Own event detail; someone else's event is NOT_EVENT_OWNER"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID, organizer_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(event_not_found())
            if event.organizer_id != organizer_id:
                return Return.err(not_event_owner())
            return Return.ok(EventResponse(event=to_event_info(event)))
