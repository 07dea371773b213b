from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from eventuraa.domain.entities import TicketTier


class ITicketTierRepository(ABC):
    """TicketTier repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tier_id: UUID) -> Optional[TicketTier]:
        """Get a tier with its current sold counter"""
        pass

    @abstractmethod
    async def try_increment_sold(self, tier_id: UUID, count: int) -> bool:
        """
        Atomically add `count` to sold, only if the result stays within quantity.

        Must be a single conditional write so concurrent callers can never
        jointly exceed quantity.

        Returns:
            True if the increment was applied, False if stock was insufficient
        """
        pass
