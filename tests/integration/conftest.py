import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from eventuraa.depends import get_unit_of_work
from eventuraa.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

API = "/api"


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db", connect_args={"timeout": 10})
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from eventuraa.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
def auth_headers():
    return bearer


@pytest_asyncio.fixture
async def admin(client, test_data):
    """Signed-up admin: (token, user)"""
    from config import ApplicationConfig

    payload = test_data.get_copy("admin_signup")
    payload["adminSecretKey"] = ApplicationConfig.ADMIN_SIGNUP_SECRET
    response = await client.post(f"{API}/auth/admin/signup", json=payload)
    assert response.status_code == 201, response.text
    data = response.json()
    return data["token"], data["user"]


@pytest_asyncio.fixture
def make_organizer(client, admin, test_data):
    """Factory: sign up an organizer, optionally verified by the admin"""

    async def _make(email: str, verified: bool = True):
        payload = test_data.get_copy("organizer_signup")
        payload["email"] = email
        response = await client.post(f"{API}/auth/organizer/signup", json=payload)
        assert response.status_code == 201, response.text
        data = response.json()
        if verified:
            admin_token, _ = admin
            verify = await client.put(
                f"{API}/admin/organizers/{data['user']['id']}/verify",
                json={"isVerified": True},
                headers=bearer(admin_token),
            )
            assert verify.status_code == 200, verify.text
        return data["token"], data["user"]

    return _make


@pytest_asyncio.fixture
def make_event(client, test_data):
    """Factory: create an event as an organizer, returns the event JSON"""

    async def _make(organizer_token: str, **overrides):
        draft = test_data.get_copy("event_draft")
        draft.update(overrides)
        response = await client.post(f"{API}/events", json=draft, headers=bearer(organizer_token))
        assert response.status_code == 201, response.text
        return response.json()["event"]

    return _make


@pytest_asyncio.fixture
def approve_event(client, admin):
    """Factory: admin approves an event"""

    async def _approve(event_id: str, notes: str = "looks good"):
        admin_token, _ = admin
        response = await client.put(
            f"{API}/admin/events/{event_id}/review",
            json={"status": "approved", "reviewNotes": notes},
            headers=bearer(admin_token),
        )
        assert response.status_code == 200, response.text
        return response.json()["event"]

    return _approve
