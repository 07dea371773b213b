from uuid import uuid4

import pytest

from eventuraa.app.use_cases.events import ReviewEventUseCase
from eventuraa.domain.entities import ApprovalStatus


@pytest.mark.asyncio
@pytest.mark.parametrize("outcome", ["approved", "rejected"])
async def test_review_pending_event(mock_uow, make_event, outcome):
    event = make_event()
    admin_id = uuid4()
    mock_uow.events.get_by_id.return_value = event

    result = await ReviewEventUseCase(mock_uow).execute(event.id, admin_id, outcome, "looks good")

    assert result.is_ok()
    assert event.approval_status == ApprovalStatus(outcome)
    assert event.admin_feedback == "looks good"
    assert event.reviewed_by == admin_id
    assert event.reviewed_at is not None
    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "event_reviewed"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["pending", "maybe", None])
async def test_invalid_review_status(mock_uow, status):
    result = await ReviewEventUseCase(mock_uow).execute(uuid4(), uuid4(), status)

    assert result.error.code == "INVALID_REVIEW_STATUS"
    mock_uow.events.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_event(mock_uow):
    result = await ReviewEventUseCase(mock_uow).execute(uuid4(), uuid4(), "approved")
    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_no_second_review(mock_uow, make_event):
    event = make_event(status=ApprovalStatus.rejected)
    mock_uow.events.get_by_id.return_value = event

    result = await ReviewEventUseCase(mock_uow).execute(event.id, uuid4(), "approved")

    assert result.error.code == "EVENT_ALREADY_REVIEWED"
    assert event.approval_status == ApprovalStatus.rejected
    mock_uow.commit.assert_not_called()
