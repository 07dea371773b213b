from uuid import uuid4

import pytest

from eventuraa.app.services.authorization_gate import (
    INVALID_TOKEN_MESSAGE,
    AuthorizationGate,
    Principal,
)
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.domain.entities import UserRole


@pytest.mark.asyncio
async def test_authenticate_returns_principal(mock_uow, token_service, organizer):
    mock_uow.users.get_by_id.return_value = organizer
    gate = AuthorizationGate(mock_uow, token_service)

    result = await gate.authenticate(token_service.issue(organizer.id))

    assert result.is_ok()
    principal = result.value
    assert principal.id == organizer.id
    assert principal.role == UserRole.organizer
    assert principal.verified is True
    mock_uow.users.get_by_id.assert_called_once_with(organizer.id)


@pytest.mark.asyncio
async def test_missing_token(mock_uow, token_service):
    gate = AuthorizationGate(mock_uow, token_service)

    result = await gate.authenticate(None)

    assert result.error.code == "UNAUTHORIZED"
    assert result.error.message == "Authentication required"
    mock_uow.users.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_expired_and_orphaned_tokens_share_one_message(mock_uow, token_service):
    from datetime import timedelta

    gate = AuthorizationGate(mock_uow, token_service)
    expired = SessionTokenService("unit-test-secret", lifetime=timedelta(seconds=-1)).issue(uuid4())
    orphaned = token_service.issue(uuid4())  # users.get_by_id returns None

    results = [
        await gate.authenticate("garbage"),
        await gate.authenticate(expired),
        await gate.authenticate(orphaned),
    ]

    assert {r.error.code for r in results} == {"UNAUTHORIZED"}
    assert {r.error.message for r in results} == {INVALID_TOKEN_MESSAGE}


def _principal(role, verified=None):
    return Principal(id=uuid4(), name="x", email="x@example.com", role=role, verified=verified)


def test_require_role():
    admin = _principal(UserRole.admin)
    user = _principal(UserRole.user)

    assert AuthorizationGate.require_role(admin, [UserRole.admin]).is_ok()
    result = AuthorizationGate.require_role(user, [UserRole.admin])
    assert result.error.code == "FORBIDDEN_ROLE"


def test_require_verified_organizer():
    assert AuthorizationGate.require_verified_organizer(_principal(UserRole.organizer, True)).is_ok()

    pending = AuthorizationGate.require_verified_organizer(_principal(UserRole.organizer, False))
    assert pending.error.code == "ORGANIZER_NOT_VERIFIED"

    # Role is checked first
    other_role = AuthorizationGate.require_verified_organizer(_principal(UserRole.professional, True))
    assert other_role.error.code == "FORBIDDEN_ROLE"
