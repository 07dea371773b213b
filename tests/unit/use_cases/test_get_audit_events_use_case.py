from datetime import datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from eventuraa.app.use_cases.audit import GetAuditEventsUseCase
from eventuraa.domain.entities import AuditEvent, User, UserRole


@pytest.fixture
def audit_uow(mock_uow):
    mock_uow.audit_events.get_page = AsyncMock(return_value=([], None))
    return mock_uow


@pytest.mark.asyncio
async def test_resolves_each_user_email_once(audit_uow):
    user = User(id=uuid4(), name="Nimal", email="nimal@example.com", password_hash="x", role=UserRole.user)
    events = [
        AuditEvent(user_id=user.id, action="signin", created_at=datetime(2030, 1, 2)),
        AuditEvent(user_id=user.id, action="signup", created_at=datetime(2030, 1, 1)),
        AuditEvent(user_id=None, action="anonymous", created_at=datetime(2029, 12, 31)),
    ]
    audit_uow.audit_events.get_page.return_value = (events, "next-page")
    audit_uow.users.get_by_id.return_value = user

    result = await GetAuditEventsUseCase(audit_uow).execute(limit=3)

    assert result.is_ok()
    page = result.value
    assert [e.action for e in page.events] == ["signin", "signup", "anonymous"]
    assert [e.user_email for e in page.events] == ["nimal@example.com", "nimal@example.com", None]
    assert page.events[0].timestamp == "2030-01-02T00:00:00Z"
    assert page.next_cursor == "next-page"
    audit_uow.users.get_by_id.assert_called_once_with(user.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 101])
async def test_limit_out_of_range(audit_uow, limit):
    result = await GetAuditEventsUseCase(audit_uow).execute(limit=limit)

    assert result.error.code == "VALIDATION_FAILED"
    audit_uow.audit_events.get_page.assert_not_called()


@pytest.mark.asyncio
async def test_malformed_cursor_is_a_validation_error(audit_uow):
    audit_uow.audit_events.get_page.side_effect = ValueError("Malformed audit cursor")

    result = await GetAuditEventsUseCase(audit_uow).execute(cursor="garbage")

    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.details[0].param == "cursor"
