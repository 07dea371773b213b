from abc import ABC, abstractmethod

from eventuraa.domain.entities import Reservation


class IReservationRepository(ABC):
    """Reservation repository interface - application layer"""

    @abstractmethod
    async def create(self, reservation: Reservation) -> Reservation:
        """Record a reservation"""
        pass
