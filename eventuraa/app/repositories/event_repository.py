from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from eventuraa.domain.entities import ApprovalStatus, Event, EventCategory


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event (with its ticket tiers) by ID"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event together with its ticket tiers"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """
        Update existing event.

        Raises:
            ConstraintViolationError: a tier quantity fell below its sold
                counter, e.g. after a concurrent reservation
        """
        pass

    @abstractmethod
    async def delete(self, event: Event) -> None:
        """Delete an event and its ticket tiers"""
        pass

    @abstractmethod
    async def list_public(self, category: Optional[EventCategory] = None) -> List[Event]:
        """Approved and published events, latest event date first"""
        pass

    @abstractmethod
    async def list_by_organizer(self, organizer_id: UUID) -> List[Event]:
        """All events of one organizer, newest first"""
        pass

    @abstractmethod
    async def list_all(self, status: Optional[ApprovalStatus] = None) -> List[Event]:
        """All events, optionally filtered by approval status, newest first"""
        pass

    @abstractmethod
    async def list_by_status_paginated(
        self,
        status: ApprovalStatus,
        offset: int,
        limit: int,
        newest_first: bool = True,
    ) -> Tuple[List[Event], int]:
        """
        Page through events in one approval status.

        Returns:
            Tuple of (events on the page, total matching events)
        """
        pass
