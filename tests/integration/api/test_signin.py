"""
Integration tests for sign-in and the authenticated profile
"""
from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient

from eventuraa.app.services.authorization_gate import INVALID_TOKEN_MESSAGE
from eventuraa.app.services.token_service import SessionTokenService

API = "/api"


@pytest.mark.asyncio
async def test_signin_success(client: AsyncClient, test_data):
    payload = test_data.get_copy("user_signup")
    await client.post(f"{API}/auth/signup", json=payload)

    response = await client.post(
        f"{API}/auth/signin", json={"email": payload["email"], "password": payload["password"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["token"]
    assert data["user"]["email"] == payload["email"]


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(client: AsyncClient, test_data):
    payload = test_data.get_copy("user_signup")
    await client.post(f"{API}/auth/signup", json=payload)

    wrong_password = await client.post(
        f"{API}/auth/signin", json={"email": payload["email"], "password": "WrongPass123"}
    )
    unknown_email = await client.post(
        f"{API}/auth/signin", json={"email": "ghost@example.com", "password": payload["password"]}
    )
    missing_password = await client.post(f"{API}/auth/signin", json={"email": payload["email"]})

    assert wrong_password.status_code == unknown_email.status_code == missing_password.status_code == 401
    assert wrong_password.content == unknown_email.content == missing_password.content
    assert wrong_password.json()["message"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_profile_of_signed_in_organizer(client: AsyncClient, test_data, auth_headers):
    signup = await client.post(
        f"{API}/auth/organizer/signup", json=test_data.get_copy("organizer_signup")
    )
    token = signup.json()["token"]

    response = await client.get(f"{API}/auth/profile", headers=auth_headers(token))

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["role"] == "organizer"
    assert user["organizerInfo"]["isVerified"] is False


@pytest.mark.asyncio
async def test_profile_without_token(client: AsyncClient):
    response = await client.get(f"{API}/auth/profile")

    assert response.status_code == 401
    assert response.json()["message"] == "Authentication required"


@pytest.mark.asyncio
async def test_bad_expired_and_orphaned_tokens_get_one_message(client: AsyncClient, auth_headers):
    from config import ApplicationConfig

    expired = SessionTokenService(
        ApplicationConfig.JWT_SECRET, lifetime=timedelta(seconds=-1)
    ).issue(uuid4())
    orphaned = SessionTokenService(ApplicationConfig.JWT_SECRET).issue(uuid4())
    foreign = SessionTokenService("some-other-secret").issue(uuid4())

    responses = [
        await client.get(f"{API}/auth/profile", headers=auth_headers(token))
        for token in ("not-a-jwt", expired, orphaned, foreign)
    ]

    assert {r.status_code for r in responses} == {401}
    assert {r.json()["message"] for r in responses} == {INVALID_TOKEN_MESSAGE}
