"""
Integration tests for ticket reservations

- sold never exceeds quantity, also under concurrent requests
- Only approved, published events can be reserved from
- Organizer edits racing a sale are rejected, never a 500
"""
import asyncio
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.adapter.repositories.event_repository import EventRepository
from eventuraa.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from eventuraa.app.use_cases.events import EventChanges, ReserveTicketsUseCase, UpdateEventUseCase
from eventuraa.domain.entities import Reservation, TicketTier

API = "/api"


@pytest.fixture
def buyer(client: AsyncClient, test_data):
    async def _signup():
        response = await client.post(f"{API}/auth/signup", json=test_data.get_copy("user_signup"))
        data = response.json()
        return data["token"], data["user"]

    return _signup


@pytest.mark.asyncio
async def test_reserve_tickets(
    client: AsyncClient, make_organizer, make_event, approve_event, buyer, auth_headers
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    buyer_token, _ = await buyer()

    response = await client.post(
        f"{API}/events/{event['id']}/reservations",
        json={"tierName": "VIP", "count": 2},
        headers=auth_headers(buyer_token),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["reservation"]["count"] == 2
    assert data["reservation"]["totalPrice"] == 15001.0
    assert data["tier"]["sold"] == 2
    assert data["tier"]["available"] == 3


@pytest.mark.asyncio
async def test_reserve_more_than_available(
    client: AsyncClient, make_organizer, make_event, approve_event, buyer, auth_headers
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    buyer_token, _ = await buyer()

    response = await client.post(
        f"{API}/events/{event['id']}/reservations",
        json={"tierName": "VIP", "count": 6},
        headers=auth_headers(buyer_token),
    )
    detail = await client.get(f"{API}/events/{event['id']}")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "OUT_OF_STOCK"
    vip = [t for t in detail.json()["event"]["tickets"] if t["name"] == "VIP"][0]
    assert vip["sold"] == 0


@pytest.mark.asyncio
async def test_reserve_count_too_large_for_store(
    client: AsyncClient, make_organizer, make_event, approve_event, buyer, auth_headers
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    buyer_token, _ = await buyer()

    response = await client.post(
        f"{API}/events/{event['id']}/reservations",
        json={"tierName": "VIP", "count": 10**20},
        headers=auth_headers(buyer_token),
    )

    assert response.status_code == 422
    assert [e["param"] for e in response.json()["errors"]] == ["count"]


@pytest.mark.asyncio
async def test_reserve_unknown_tier(
    client: AsyncClient, make_organizer, make_event, approve_event, buyer, auth_headers
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    buyer_token, _ = await buyer()

    response = await client.post(
        f"{API}/events/{event['id']}/reservations",
        json={"tierName": "Balcony", "count": 1},
        headers=auth_headers(buyer_token),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TIER_NOT_FOUND"


@pytest.mark.asyncio
async def test_reserve_from_pending_event(
    client: AsyncClient, make_organizer, make_event, buyer, auth_headers
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    buyer_token, _ = await buyer()

    response = await client.post(
        f"{API}/events/{event['id']}/reservations",
        json={"tierName": "VIP", "count": 1},
        headers=auth_headers(buyer_token),
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_reserve_requires_authentication(
    client: AsyncClient, make_organizer, make_event, approve_event
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])

    response = await client.post(
        f"{API}/events/{event['id']}/reservations", json={"tierName": "VIP", "count": 1}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_concurrent_reservations_never_oversell(
    engine, make_organizer, make_event, approve_event, buyer
):
    token, _ = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    _, user = await buyer()
    event_id = UUID(event["id"])
    user_id = UUID(user["id"])

    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def reserve_one():
        async with Session() as session:
            use_case = ReserveTicketsUseCase(SqlAlchemyUnitOfWork(session))
            return await use_case.execute(event_id, user_id, "VIP", 1)

    results = await asyncio.gather(*(reserve_one() for _ in range(12)))

    assert sum(1 for r in results if r.is_ok()) == 5
    assert {r.error.code for r in results if r.is_err()} == {"OUT_OF_STOCK"}

    async with Session() as session:
        tier = (
            await session.exec(
                select(TicketTier).where(TicketTier.event_id == event_id, TicketTier.name == "VIP")
            )
        ).one()
        reservations = (
            await session.exec(select(Reservation).where(Reservation.event_id == event_id))
        ).all()
    assert tier.sold == 5
    assert len(reservations) == 5


@pytest.mark.asyncio
async def test_quantity_cut_racing_a_sale_is_rejected(
    engine, make_organizer, make_event, approve_event, buyer, monkeypatch
):
    token, organizer = await make_organizer("a@example.com")
    event = await make_event(token)
    await approve_event(event["id"])
    _, user = await buyer()
    event_id = UUID(event["id"])
    user_id = UUID(user["id"])

    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    load = EventRepository.get_by_id
    sales = []

    async def load_then_sell(self, event_id):
        # A buyer takes 4 VIP tickets after the edit has read sold == 0
        loaded = await load(self, event_id)
        if not sales:
            sales.append(True)
            async with Session() as other:
                sale = await ReserveTicketsUseCase(SqlAlchemyUnitOfWork(other)).execute(
                    event_id, user_id, "VIP", 4
                )
            assert sale.is_ok()
        return loaded

    monkeypatch.setattr(EventRepository, "get_by_id", load_then_sell)
    changes = EventChanges.model_validate(
        {
            "tickets": [
                {"name": "Standard", "price": 2500, "quantity": 100},
                {"name": "VIP", "price": 7500.5, "quantity": 2},
            ]
        }
    )

    async with Session() as session:
        result = await UpdateEventUseCase(SqlAlchemyUnitOfWork(session)).execute(
            event_id, UUID(organizer["id"]), changes
        )

    assert result.error.code == "VALIDATION_FAILED"
    assert [d.param for d in result.error.details] == ["tickets"]

    async with Session() as session:
        tier = (
            await session.exec(
                select(TicketTier).where(TicketTier.event_id == event_id, TicketTier.name == "VIP")
            )
        ).one()
    assert tier.sold == 4
    assert tier.quantity == 5
