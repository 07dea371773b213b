"""
Sign-in Use Case

Checks credentials and issues a session token.
"""

from typing import Optional

from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.domain.entities import AuditEvent
from eventuraa.libs.result import Error, Result, Return
from .dtos import AuthResponse, to_user_info

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class SignInUseCase:
    """
    Use case for signing in with email and password.

    Business Rules:
    - Missing fields, unknown email and wrong password all fail with the
      same INVALID_CREDENTIALS error
    - Unknown emails still pay for one bcrypt comparison
    - Successful sign-in is audited
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: SessionTokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, email: Optional[str], password: Optional[str]) -> Result[AuthResponse]:
        """
        Execute sign-in use case.

        Args:
            email: User email (exact match)
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error INVALID_CREDENTIALS
        """
        if not email or not password:
            return Return.err(INVALID_CREDENTIALS)

        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip())

            if user is None:
                self.password_hasher.verify_dummy(password)
                return Return.err(INVALID_CREDENTIALS)

            if not self.password_hasher.verify(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="signin",
                    event_metadata={"email": user.email, "role": user.role.value},
                )
            )
            await self.uow.commit()

            return Return.ok(
                AuthResponse(
                    token=self.token_service.issue(user.id),
                    user=to_user_info(user),
                )
            )
