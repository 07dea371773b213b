from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.ticket_tier_repository import ITicketTierRepository
from eventuraa.domain.entities import TicketTier


class TicketTierRepository(ITicketTierRepository):
    """TicketTier repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tier_id: UUID) -> Optional[TicketTier]:
        """Get a tier, bypassing any stale copy in the identity map"""
        stmt = (
            select(TicketTier)
            .where(TicketTier.id == tier_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def try_increment_sold(self, tier_id: UUID, count: int) -> bool:
        """
        Conditional increment in one UPDATE statement.

        The WHERE clause is evaluated by the database against the row it is
        about to write, so two requests can never both pass the bound.
        """
        stmt = (
            update(TicketTier)
            .where(
                TicketTier.id == tier_id,
                TicketTier.sold + count <= TicketTier.quantity,
            )
            .values(sold=TicketTier.sold + count)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
