from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.reservation_repository import IReservationRepository
from eventuraa.domain.entities import Reservation


class ReservationRepository(IReservationRepository):
    """Reservation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, reservation: Reservation) -> Reservation:
        """Record a reservation"""
        self.session.add(reservation)
        await self.session.flush()
        await self.session.refresh(reservation)
        return reservation
