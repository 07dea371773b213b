from datetime import timedelta
from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from eventuraa.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from eventuraa.api.error import ClientError, raise_for_error
from eventuraa.app.services.authorization_gate import AuthorizationGate, Principal
from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.domain.entities import UserRole


def _engine_options(db_uri: str) -> dict:
    # SQLite: how long a statement waits on a locked database.
    # Other dialects: how long a request waits for a pooled connection.
    if db_uri.startswith("sqlite"):
        return {"connect_args": {"timeout": ApplicationConfig.DB_TIMEOUT_SECONDS}}
    return {"pool_timeout": ApplicationConfig.DB_TIMEOUT_SECONDS}


engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    **_engine_options(ApplicationConfig.DB_URI),
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

token_service = SessionTokenService(
    ApplicationConfig.JWT_SECRET,
    lifetime=timedelta(days=ApplicationConfig.JWT_LIFETIME_DAYS),
)
password_hasher = PasswordHasher()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> SessionTokenService:
    return token_service


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_authorization_gate(
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: SessionTokenService = Depends(get_token_service),
) -> AuthorizationGate:
    return AuthorizationGate(uow, tokens)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> Principal:
    """
    Dependency to authenticate the bearer token from the Authorization header.

    Returns:
        Principal snapshot of the signed-in user

    Raises:
        ClientError: 401 if the token is missing, invalid, expired or its
        user no longer exists
    """
    token = credentials.credentials if credentials else None
    result = await gate.authenticate(token)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)
    return result.value


def require_roles(*roles: UserRole):
    """Dependency factory: authenticated user with one of the given roles"""

    async def dependency(principal: Principal = Depends(get_current_user)) -> Principal:
        result = AuthorizationGate.require_role(principal, roles)
        if result.is_err():
            raise_for_error(result.error)
        return result.value

    return dependency


async def require_verified_organizer(
    principal: Principal = Depends(get_current_user),
) -> Principal:
    """Dependency: organizer whose profile an admin has verified"""
    result = AuthorizationGate.require_verified_organizer(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
