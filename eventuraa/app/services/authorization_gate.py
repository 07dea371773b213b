"""
Authorization Gate

Three composable checks run in order by the API dependencies:
authenticate -> require role -> require verified organizer.
The first failure short-circuits; a failing check has no side effects.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional
from uuid import UUID

from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.domain.entities import User, UserRole
from eventuraa.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

# One external message for invalid, expired and orphaned tokens
INVALID_TOKEN_MESSAGE = "Invalid or expired token. Please sign in again."


@dataclass(frozen=True)
class Principal:
    """Authenticated subject attached to the request"""

    id: UUID
    name: str
    email: str
    role: UserRole
    verified: Optional[bool] = None  # organizer/professional profiles only

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        profile = user.profile
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            verified=profile.verified if profile is not None else None,
        )


class AuthorizationGate:
    """Authentication and role/verification policy checks"""

    def __init__(self, uow: UnitOfWork, token_service: SessionTokenService):
        self.uow = uow
        self.token_service = token_service

    async def authenticate(self, token: Optional[str]) -> Result[Principal]:
        """
        Resolve a bearer token to a principal.

        Returns:
            Result with Principal, or Error UNAUTHORIZED. The internal reason
            (missing, expired, invalid, unknown subject) is only logged.
        """
        if not token:
            return Return.err(Error("UNAUTHORIZED", "Authentication required"))

        verification = self.token_service.verify(token)
        if verification.is_err():
            logger.info(f"Rejected bearer token: {verification.error.code}")
            return Return.err(Error("UNAUTHORIZED", INVALID_TOKEN_MESSAGE))

        async with self.uow:
            user = await self.uow.users.get_by_id(verification.value)
            if user is None:
                logger.info("Rejected bearer token: SUBJECT_NOT_FOUND")
                return Return.err(Error("UNAUTHORIZED", INVALID_TOKEN_MESSAGE))
            # Snapshot before the unit of work closes
            return Return.ok(Principal.from_user(user))

    @staticmethod
    def require_role(principal: Principal, roles: Iterable[UserRole]) -> Result[Principal]:
        """Reject principals whose role is outside the allowed set"""
        allowed = set(roles)
        if principal.role not in allowed:
            logger.info(f"Role {principal.role.value} denied; allowed: {sorted(r.value for r in allowed)}")
            return Return.err(
                Error(
                    "FORBIDDEN_ROLE",
                    f"Access denied. {principal.role.value} role is not authorized to access this resource",
                )
            )
        return Return.ok(principal)

    @staticmethod
    def require_verified_organizer(principal: Principal) -> Result[Principal]:
        """Organizer role plus a verified organizer profile"""
        role_check = AuthorizationGate.require_role(principal, [UserRole.organizer])
        if role_check.is_err():
            return role_check
        if not principal.verified:
            return Return.err(
                Error(
                    "ORGANIZER_NOT_VERIFIED",
                    "Your organizer account is pending verification. Please wait for approval.",
                )
            )
        return Return.ok(principal)
