"""
Delete Event Use Case
"""

from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.domain.entities import AuditEvent
from eventuraa.libs.result import Result, Return
from .dtos import DeleteEventResponse
from .update_event_use_case import event_not_found, not_event_owner


class DeleteEventUseCase:
    """
    Use case for deleting an event and its tiers.

    Business Rules:
    - Only the owning organizer may delete
    - Reservations stay as sales records
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID, caller_id: UUID) -> Result[DeleteEventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(event_not_found())
            if event.organizer_id != caller_id:
                return Return.err(not_event_owner())

            title = event.title
            await self.uow.events.delete(event)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=caller_id,
                    action="event_deleted",
                    event_metadata={"event_id": str(event_id), "title": title},
                )
            )
            await self.uow.commit()

            return Return.ok(DeleteEventResponse(message="Event deleted successfully"))
