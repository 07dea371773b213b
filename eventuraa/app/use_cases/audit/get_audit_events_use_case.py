"""
Get Audit Events Use Case

Admin read of the audit log, newest first, one cursor page at a time.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.app.use_cases.validation import FieldError, validation_failed
from eventuraa.domain.entities import AuditEvent
from eventuraa.libs.result import Result, Return

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


class AuditEventInfo(CamelModel):
    id: str
    action: str
    user_id: Optional[str] = None
    user_email: Optional[str] = None
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(CamelModel):
    success: bool = True
    events: List[AuditEventInfo]
    next_cursor: Optional[str] = None


def _to_info(event: AuditEvent, email: Optional[str]) -> AuditEventInfo:
    return AuditEventInfo(
        id=str(event.id),
        action=event.action,
        user_id=str(event.user_id) if event.user_id else None,
        user_email=email,
        timestamp=event.created_at.isoformat() + "Z",
        metadata=event.event_metadata or {},
    )


class GetAuditEventsUseCase:
    """
    Business Rules:
    - limit between 1 and 100
    - The acting user's email is resolved at read time; deleted accounts
      show no email
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, limit: int = DEFAULT_LIMIT, cursor: Optional[str] = None
    ) -> Result[AuditEventsResponse]:
        """
        Args:
            limit: Page size
            cursor: nextCursor of the previous page

        Returns:
            Result with the page, or VALIDATION_FAILED for a bad limit or cursor
        """
        if limit < 1 or limit > MAX_LIMIT:
            return Return.err(
                validation_failed(
                    [FieldError(param="limit", msg=f"limit must be between 1 and {MAX_LIMIT}")]
                )
            )

        async with self.uow:
            try:
                events, next_cursor = await self.uow.audit_events.get_page(limit, cursor)
            except ValueError:
                return Return.err(
                    validation_failed([FieldError(param="cursor", msg="Invalid pagination cursor")])
                )

            emails: Dict[UUID, Optional[str]] = {}
            for user_id in {event.user_id for event in events if event.user_id}:
                user = await self.uow.users.get_by_id(user_id)
                emails[user_id] = user.email if user else None

            infos = [_to_info(event, emails.get(event.user_id)) for event in events]
            return Return.ok(AuditEventsResponse(events=infos, next_cursor=next_cursor))
