from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.errors import ConstraintViolationError
from eventuraa.app.repositories.event_repository import IEventRepository
from eventuraa.domain.entities import ApprovalStatus, Event, EventCategory


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event (with its ticket tiers) by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, event: Event) -> Event:
        """Create a new event together with its ticket tiers"""
        self.session.add(event)
        await self.session.flush()
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConstraintViolationError(str(exc.orig)) from exc
        return event

    async def delete(self, event: Event) -> None:
        """Delete an event; tiers go with it (delete-orphan cascade)"""
        await self.session.delete(event)
        await self.session.flush()

    async def list_public(self, category: Optional[EventCategory] = None) -> List[Event]:
        """Approved and published events, latest event date first"""
        stmt = select(Event).where(
            Event.approval_status == ApprovalStatus.approved,
            Event.published == True,  # noqa: E712
        )
        if category is not None:
            stmt = stmt.where(Event.category == category)
        stmt = stmt.order_by(Event.event_date.desc(), Event.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_organizer(self, organizer_id: UUID) -> List[Event]:
        """All events of one organizer, newest first"""
        stmt = (
            select(Event)
            .where(Event.organizer_id == organizer_id)
            .order_by(Event.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all(self, status: Optional[ApprovalStatus] = None) -> List[Event]:
        """All events, optionally filtered by approval status, newest first"""
        stmt = select(Event)
        if status is not None:
            stmt = stmt.where(Event.approval_status == status)
        stmt = stmt.order_by(Event.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_status_paginated(
        self,
        status: ApprovalStatus,
        offset: int,
        limit: int,
        newest_first: bool = True,
    ) -> Tuple[List[Event], int]:
        """Page through events in one approval status"""
        count_stmt = (
            select(func.count())
            .select_from(Event)
            .where(Event.approval_status == status)
        )
        total = (await self.session.exec(count_stmt)).one()

        order = Event.created_at.desc() if newest_first else Event.created_at.asc()
        stmt = (
            select(Event)
            .where(Event.approval_status == status)
            .order_by(order)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all()), total
