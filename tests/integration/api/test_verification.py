"""
Integration tests for organizer and professional verification
"""
import pytest
from httpx import AsyncClient

API = "/api"


@pytest.mark.asyncio
async def test_verify_organizer_unlocks_event_management(
    client: AsyncClient, admin, make_organizer, test_data, auth_headers
):
    admin_token, _ = admin
    token, organizer = await make_organizer("a@example.com", verified=False)

    response = await client.put(
        f"{API}/admin/organizers/{organizer['id']}/verify",
        json={"isVerified": True},
        headers=auth_headers(admin_token),
    )
    create = await client.post(
        f"{API}/events", json=test_data.get_copy("event_draft"), headers=auth_headers(token)
    )

    assert response.status_code == 200
    assert response.json()["user"]["organizerInfo"]["isVerified"] is True
    assert create.status_code == 201


@pytest.mark.asyncio
async def test_unverify_locks_event_management_again(
    client: AsyncClient, admin, make_organizer, test_data, auth_headers
):
    admin_token, _ = admin
    token, organizer = await make_organizer("a@example.com")

    await client.put(
        f"{API}/admin/organizers/{organizer['id']}/verify",
        json={"isVerified": False},
        headers=auth_headers(admin_token),
    )
    create = await client.post(
        f"{API}/events", json=test_data.get_copy("event_draft"), headers=auth_headers(token)
    )

    assert create.status_code == 403
    assert create.json()["error"]["code"] == "ORGANIZER_NOT_VERIFIED"


@pytest.mark.asyncio
async def test_verify_professional(client: AsyncClient, admin, test_data, auth_headers):
    admin_token, _ = admin
    signup = await client.post(
        f"{API}/auth/doctor/signup", json=test_data.get_copy("professional_signup")
    )
    user_id = signup.json()["user"]["id"]

    response = await client.put(
        f"{API}/admin/professionals/{user_id}/verify",
        json={"isVerified": True},
        headers=auth_headers(admin_token),
    )

    assert response.status_code == 200
    assert response.json()["user"]["professionalInfo"]["isVerified"] is True


@pytest.mark.asyncio
async def test_verify_wrong_role(client: AsyncClient, admin, test_data, auth_headers):
    admin_token, _ = admin
    signup = await client.post(f"{API}/auth/signup", json=test_data.get_copy("user_signup"))

    response = await client.put(
        f"{API}/admin/organizers/{signup.json()['user']['id']}/verify",
        json={"isVerified": True},
        headers=auth_headers(admin_token),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ROLE_MISMATCH"


@pytest.mark.asyncio
async def test_verify_unknown_user(client: AsyncClient, admin, auth_headers):
    admin_token, _ = admin

    response = await client.put(
        f"{API}/admin/organizers/00000000-0000-0000-0000-000000000000/verify",
        json={"isVerified": True},
        headers=auth_headers(admin_token),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_organizers(client: AsyncClient, admin, make_organizer, auth_headers):
    admin_token, _ = admin
    await make_organizer("a@example.com")
    await make_organizer("b@example.com", verified=False)

    response = await client.get(f"{API}/admin/organizers", headers=auth_headers(admin_token))

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    flags = {o["email"]: o["organizerInfo"]["isVerified"] for o in data["organizers"]}
    assert flags == {"a@example.com": True, "b@example.com": False}


@pytest.mark.asyncio
async def test_non_admin_cannot_verify(client: AsyncClient, make_organizer, auth_headers):
    token, organizer = await make_organizer("a@example.com", verified=False)

    response = await client.put(
        f"{API}/admin/organizers/{organizer['id']}/verify",
        json={"isVerified": True},
        headers=auth_headers(token),
    )

    assert response.status_code == 403
