"""
Request Password Reset Use Case

Issues a single-use password reset token for a known email.
"""

import hashlib
import logging
import secrets
from datetime import timedelta
from typing import Awaitable, Callable, Optional

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.domain.base import utcnow
from eventuraa.domain.entities import AuditEvent, PasswordResetToken
from eventuraa.libs.result import Result, Return
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

# Receives (email, plain token); delivering the link is someone else's job
ResetTokenNotifier = Callable[[str, str], Awaitable[None]]

RESET_REQUESTED_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Generate cryptographically secure token
    - Hash token with SHA-256 before storing
    - Token expires after the configured TTL
    - Earlier unused tokens of the same user are invalidated
    - No email enumeration (same response for valid/invalid emails)
    - Audit event created for security tracking
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ttl: timedelta = timedelta(hours=1),
        notifier: Optional[ResetTokenNotifier] = None,
    ):
        self.uow = uow
        self.ttl = ttl
        self.notifier = notifier

    async def execute(self, email: Optional[str]) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status; always the same message
        """
        response = RequestPasswordResetResponse(status="sent", message=RESET_REQUESTED_MESSAGE)
        if not email:
            return Return.ok(response)

        async with self.uow:
            user = await self.uow.users.get_by_email(email.strip())
            if user is None:
                return Return.ok(response)

            reset_token = secrets.token_urlsafe(32)
            token_hash = hashlib.sha256(reset_token.encode()).hexdigest()

            await self.uow.password_reset_tokens.invalidate_unused_for_user(user.id)
            password_reset_token = PasswordResetToken(
                user_id=user.id,
                token_hash=token_hash,
                used=False,
                expires_at=utcnow() + self.ttl,
            )
            await self.uow.password_reset_tokens.create(password_reset_token)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="password_reset_requested",
                    event_metadata={"email": user.email, "token_id": str(password_reset_token.id)},
                )
            )
            await self.uow.commit()
            user_email = user.email

        if self.notifier is not None:
            await self.notifier(user_email, reset_token)
        else:
            logger.info("Password reset token issued; no notifier configured")

        return Return.ok(response)
