import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.adapter.repositories.audit_event_repository import AuditEventRepository
from eventuraa.adapter.repositories.event_repository import EventRepository
from eventuraa.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from eventuraa.adapter.repositories.reservation_repository import ReservationRepository
from eventuraa.adapter.repositories.ticket_tier_repository import TicketTierRepository
from eventuraa.adapter.repositories.user_repository import UserRepository
from eventuraa.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """UnitOfWork over one AsyncSession; the session may be reused for several blocks"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self.users = UserRepository(self.session)
        self.events = EventRepository(self.session)
        self.ticket_tiers = TicketTierRepository(self.session)
        self.reservations = ReservationRepository(self.session)
        self.password_reset_tokens = PasswordResetTokenRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.warning(f"Rolling back after {exc_type.__name__}")
        # No-op when the block already committed
        await self.rollback()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
