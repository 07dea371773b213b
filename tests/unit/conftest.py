from datetime import date, timedelta
from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.domain.entities import (
    ApprovalStatus,
    Event,
    EventCategory,
    OrganizerProfile,
    TicketTier,
    User,
    UserRole,
)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_professional_reg_number = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.list_by_role = AsyncMock(return_value=[])

    uow.events = MagicMock()
    uow.events.get_by_id = AsyncMock(return_value=None)
    uow.events.create = AsyncMock(side_effect=lambda event: event)
    uow.events.update = AsyncMock(side_effect=lambda event: event)
    uow.events.delete = AsyncMock()

    uow.ticket_tiers = MagicMock()
    uow.ticket_tiers.try_increment_sold = AsyncMock(return_value=True)
    uow.ticket_tiers.get_by_id = AsyncMock()

    uow.reservations = MagicMock()
    uow.reservations.create = AsyncMock(side_effect=lambda reservation: reservation)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.mark_used = AsyncMock(return_value=True)
    uow.password_reset_tokens.invalidate_unused_for_user = AsyncMock(return_value=0)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()
    return uow


@pytest.fixture
def password_hasher():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher(cost=4)


@pytest.fixture
def token_service():
    return SessionTokenService("unit-test-secret", lifetime=timedelta(days=30))


@pytest.fixture
def organizer(password_hasher):
    user = User(
        id=uuid4(),
        name="Kandy Events",
        email="organizer@example.com",
        password_hash=password_hasher.hash("SecurePass123"),
        role=UserRole.organizer,
    )
    user.organizer_profile = OrganizerProfile(user_id=user.id, company="Kandy Events", verified=True)
    return user


@pytest.fixture
def make_event():
    """Factory for an in-memory event with two tiers"""

    def _make(organizer_id=None, status=ApprovalStatus.pending, published=True, vip_sold=0):
        event = Event(
            id=uuid4(),
            title="Esala Perahera Night Tour",
            description="Guided evening at the Perahera",
            event_date=date(2030, 8, 10),
            time="19:00",
            location="Kandy",
            category=EventCategory.cultural,
            images=[],
            published=published,
            approval_status=status,
            organizer_id=organizer_id or uuid4(),
        )
        event.tickets = [
            TicketTier(id=uuid4(), event_id=event.id, position=0, name="Standard", price=2500.0, quantity=100, sold=0),
            TicketTier(id=uuid4(), event_id=event.id, position=1, name="VIP", price=7500.0, quantity=5, sold=vip_sold),
        ]
        return event

    return _make
