from abc import ABC, abstractmethod

from eventuraa.app.repositories.audit_event_repository import IAuditEventRepository
from eventuraa.app.repositories.event_repository import IEventRepository
from eventuraa.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from eventuraa.app.repositories.reservation_repository import IReservationRepository
from eventuraa.app.repositories.ticket_tier_repository import ITicketTierRepository
from eventuraa.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    One transaction across every repository.

    Use as ``async with uow:``. Work is kept only if commit() is called
    inside the block; leaving the block always rolls back whatever is
    still pending, so an early return or an exception leaves the store
    untouched.
    """

    users: IUserRepository
    events: IEventRepository
    ticket_tiers: ITicketTierRepository
    reservations: IReservationRepository
    password_reset_tokens: IPasswordResetTokenRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
