"""
Admin Event Use Cases

Moderation reads: every event regardless of status, and the paginated
queue of events awaiting review.
"""

import math
from typing import Optional
from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError, validation_failed
from eventuraa.domain.entities import ApprovalStatus
from eventuraa.libs.result import Result, Return
from .dtos import EventListResponse, EventResponse, PendingEventsResponse, to_event_info
from .update_event_use_case import event_not_found

STATUSES = [status.value for status in ApprovalStatus]
PENDING_ORDERS = ("newest", "oldest")
MAX_PAGE_SIZE = 100


class ListAllEventsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, status: Optional[str] = None) -> Result[EventListResponse]:
        if status is not None and status not in STATUSES:
            return Return.err(
                validation_failed(
                    [FieldError(param="status", msg=f"Status must be one of: {', '.join(STATUSES)}")]
                )
            )

        async with self.uow:
            events = await self.uow.events.list_all(ApprovalStatus(status) if status else None)
            infos = [to_event_info(event) for event in events]
            return Return.ok(EventListResponse(count=len(infos), events=infos))


class GetEventForAdminUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(event_not_found())
            return Return.ok(EventResponse(event=to_event_info(event)))


class ListPendingEventsUseCase:
    """
    Review queue.

    Business Rules:
    - page starts at 1; page_size between 1 and 100
    - order is by creation time: newest (default) or oldest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, page: int = 1, page_size: int = 20, order: str = "newest"
    ) -> Result[PendingEventsResponse]:
        errors = []
        if page < 1:
            errors.append(FieldError(param="page", msg="page must be at least 1"))
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            errors.append(
                FieldError(param="pageSize", msg=f"pageSize must be between 1 and {MAX_PAGE_SIZE}")
            )
        if order not in PENDING_ORDERS:
            errors.append(FieldError(param="order", msg="order must be newest or oldest"))
        if errors:
            return Return.err(validation_failed(errors))

        async with self.uow:
            events, total = await self.uow.events.list_by_status_paginated(
                ApprovalStatus.pending,
                offset=(page - 1) * page_size,
                limit=page_size,
                newest_first=order == "newest",
            )
            return Return.ok(
                PendingEventsResponse(
                    events=[to_event_info(event) for event in events],
                    page=page,
                    page_size=page_size,
                    total=total,
                    total_pages=math.ceil(total / page_size),
                )
            )
