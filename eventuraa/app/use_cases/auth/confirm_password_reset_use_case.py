"""
Confirm Password Reset Use Case

Sets a new password from a valid reset token.
"""

import hashlib
from typing import Optional

from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError, validate_password, validation_failed
from eventuraa.domain.entities import AuditEvent
from eventuraa.libs.result import Error, Result, Return
from .dtos import ConfirmPasswordResetResponse


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing and comparing with stored hash
    - Token must not be expired and must not already be used
    - New password follows the signup password rules
    - Token is marked as used after successful reset
    - Issued session tokens stay valid (they are not revocable)
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(
        self, token: Optional[str], new_password: Optional[str]
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Errors:
            - VALIDATION_FAILED: new password does not meet the rules
            - INVALID_TOKEN: Token not found or invalid
            - TOKEN_EXPIRED: Token has expired
            - TOKEN_ALREADY_USED: Token has already been used
        """
        errors = []
        validate_password(new_password, errors, param="newPassword")
        if not token:
            errors.append(FieldError(param="token", msg="Please provide the reset token"))
        if errors:
            return Return.err(validation_failed(errors))

        token_hash = hashlib.sha256(token.encode()).hexdigest()

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)

            if reset_token is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired password reset token")
                )

            if reset_token.used:
                return Return.err(
                    Error("TOKEN_ALREADY_USED", "Password reset token has already been used")
                )

            if reset_token.is_expired():
                return Return.err(Error("TOKEN_EXPIRED", "Password reset token has expired"))

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            # Loses to a concurrent confirmation of the same token
            if not await self.uow.password_reset_tokens.mark_used(reset_token.id):
                return Return.err(
                    Error("TOKEN_ALREADY_USED", "Password reset token has already been used")
                )

            user.password_hash = self.password_hasher.hash(new_password)
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="password_reset_confirmed",
                    event_metadata={"token_id": str(reset_token.id)},
                )
            )
            await self.uow.commit()

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
