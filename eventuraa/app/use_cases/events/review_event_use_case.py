"""
Review Event Use Case

Admin decision on a pending event: pending -> approved | rejected.
"""

from typing import Optional
from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError
from eventuraa.domain.base import utcnow
from eventuraa.domain.entities import ApprovalStatus, AuditEvent
from eventuraa.libs.result import Error, Result, Return
from .dtos import EventResponse, to_event_info
from .update_event_use_case import event_not_found

REVIEW_OUTCOMES = (ApprovalStatus.approved.value, ApprovalStatus.rejected.value)


class ReviewEventUseCase:
    """
    Use case for approving or rejecting an event.

    Business Rules:
    - Status must be approved or rejected
    - Only pending events can be reviewed; there is no way back to pending
    - Feedback, reviewer and review time are recorded with the decision
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        event_id: UUID,
        admin_id: UUID,
        status: Optional[str],
        notes: Optional[str] = None,
    ) -> Result[EventResponse]:
        """
        Errors:
            - INVALID_REVIEW_STATUS: status is not approved/rejected
            - EVENT_NOT_FOUND: no such event
            - EVENT_ALREADY_REVIEWED: event is no longer pending
        """
        if status not in REVIEW_OUTCOMES:
            return Return.err(
                Error(
                    "INVALID_REVIEW_STATUS",
                    "Invalid status. Must be approved or rejected",
                    details=[FieldError(param="status", msg="Status must be approved or rejected")],
                )
            )

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(event_not_found())

            if event.approval_status != ApprovalStatus.pending:
                return Return.err(
                    Error(
                        "EVENT_ALREADY_REVIEWED",
                        f"Event has already been {event.approval_status.value}",
                    )
                )

            now = utcnow()
            event.approval_status = ApprovalStatus(status)
            event.admin_feedback = notes or ""
            event.reviewed_by = admin_id
            event.reviewed_at = now
            event.updated_at = now
            event = await self.uow.events.update(event)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=admin_id,
                    action="event_reviewed",
                    event_metadata={"event_id": str(event.id), "status": status},
                )
            )
            await self.uow.commit()

            return Return.ok(EventResponse(event=to_event_info(event)))
