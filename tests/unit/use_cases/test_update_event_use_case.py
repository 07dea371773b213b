from uuid import uuid4

import pytest

from eventuraa.app.repositories.errors import ConstraintViolationError
from eventuraa.app.use_cases.events import DeleteEventUseCase, EventChanges, UpdateEventUseCase
from eventuraa.domain.entities import ApprovalStatus


@pytest.mark.asyncio
async def test_update_applies_allow_listed_fields(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner, status=ApprovalStatus.approved)
    mock_uow.events.get_by_id.return_value = event
    changes = EventChanges.model_validate(
        {
            "title": "New title",
            "location": "Galle",
            "approvalStatus": "pending",
            "organizerId": str(uuid4()),
        }
    )

    result = await UpdateEventUseCase(mock_uow).execute(event.id, owner, changes)

    assert result.is_ok()
    assert event.title == "New title"
    assert event.location == "Galle"
    assert event.approval_status == ApprovalStatus.approved
    assert event.organizer_id == owner
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_foreign_organizer_is_rejected_before_any_change(mock_uow, make_event):
    event = make_event()
    mock_uow.events.get_by_id.return_value = event

    result = await UpdateEventUseCase(mock_uow).execute(
        event.id, uuid4(), EventChanges(title="Hijacked")
    )

    assert result.error.code == "NOT_EVENT_OWNER"
    assert event.title == "Esala Perahera Night Tour"
    mock_uow.events.update.assert_not_called()


@pytest.mark.asyncio
async def test_missing_event(mock_uow):
    result = await UpdateEventUseCase(mock_uow).execute(uuid4(), uuid4(), EventChanges(title="x"))
    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_tier_replacement_keeps_sold(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner, vip_sold=3)
    vip = event.find_tier("VIP")
    mock_uow.events.get_by_id.return_value = event
    changes = EventChanges.model_validate(
        {"tickets": [{"name": "VIP", "price": 8000, "quantity": 10}, {"name": "Balcony", "price": 500, "quantity": 50}]}
    )

    result = await UpdateEventUseCase(mock_uow).execute(event.id, owner, changes)

    assert result.is_ok()
    assert [t.name for t in event.tickets] == ["VIP", "Balcony"]
    assert event.tickets[0] is vip
    assert vip.sold == 3
    assert vip.quantity == 10
    assert event.tickets[1].sold == 0


@pytest.mark.asyncio
async def test_quantity_below_sold_is_rejected(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner, vip_sold=3)
    mock_uow.events.get_by_id.return_value = event
    changes = EventChanges.model_validate(
        {"tickets": [{"name": "Standard", "price": 2500, "quantity": 100}, {"name": "VIP", "price": 1, "quantity": 2}]}
    )

    result = await UpdateEventUseCase(mock_uow).execute(event.id, owner, changes)

    assert result.error.code == "VALIDATION_FAILED"
    assert [d.param for d in result.error.details] == ["tickets[1].quantity"]
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_sale_below_new_quantity_is_rejected(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner, vip_sold=1)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.events.update.side_effect = ConstraintViolationError(
        "CHECK constraint failed: ck_ticket_tier_sold"
    )
    changes = EventChanges.model_validate(
        {"tickets": [{"name": "Standard", "price": 2500, "quantity": 100}, {"name": "VIP", "price": 1, "quantity": 2}]}
    )

    result = await UpdateEventUseCase(mock_uow).execute(event.id, owner, changes)

    assert result.error.code == "VALIDATION_FAILED"
    assert [d.param for d in result.error.details] == ["tickets"]
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()

@pytest.mark.asyncio
async def test_removing_tier_with_sales_is_rejected(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner, vip_sold=1)
    mock_uow.events.get_by_id.return_value = event
    changes = EventChanges.model_validate({"tickets": [{"name": "Standard", "price": 2500, "quantity": 100}]})

    result = await UpdateEventUseCase(mock_uow).execute(event.id, owner, changes)

    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.details[0].param == "tickets"


@pytest.mark.asyncio
async def test_delete_requires_ownership(mock_uow, make_event):
    owner = uuid4()
    event = make_event(organizer_id=owner)
    mock_uow.events.get_by_id.return_value = event

    foreign = await DeleteEventUseCase(mock_uow).execute(event.id, uuid4())
    own = await DeleteEventUseCase(mock_uow).execute(event.id, owner)

    assert foreign.error.code == "NOT_EVENT_OWNER"
    assert own.is_ok()
    mock_uow.events.delete.assert_called_once_with(event)
