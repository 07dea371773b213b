"""
Use Case: Set Verification

Admin toggle of the verified flag on an organizer or professional profile.
An unverified organizer cannot manage events.
"""

from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.auth.dtos import UserInfo, to_user_info
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.domain.entities import AuditEvent, UserRole
from eventuraa.libs.result import Error, Result, Return

VERIFIABLE_ROLES = (UserRole.organizer, UserRole.professional)


class SetVerificationResponse(CamelModel):
    """Response DTO for SetVerificationUseCase"""

    success: bool = True
    message: str
    user: UserInfo


class SetVerificationUseCase:
    """
    Verify or un-verify a role profile.

    Business Logic:
    1. User must exist (USER_NOT_FOUND)
    2. User's role must be the role being verified (ROLE_MISMATCH)
    3. Set profile.verified, audit, commit

    Idempotent: setting the current value succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, verified: bool, role: UserRole, admin_id: UUID
    ) -> Result[SetVerificationResponse]:
        """
        Execute set verification use case.

        Args:
            user_id: Account whose profile is toggled
            verified: New value of the flag
            role: organizer or professional
            admin_id: Acting administrator (audited)
        """
        if role not in VERIFIABLE_ROLES:
            raise ValueError(f"{role.value} accounts have no verification flag")

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if user.role != role:
                return Return.err(
                    Error("ROLE_MISMATCH", f"User is not a {role.value}")
                )

            profile = user.profile
            if profile is None:
                return Return.err(Error("USER_NOT_FOUND", f"{role.value.capitalize()} profile not found"))

            profile.verified = verified
            await self.uow.users.update(user)

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=admin_id,
                    action=f"{role.value}_verification_changed",
                    event_metadata={"target_user_id": str(user.id), "verified": verified},
                )
            )
            await self.uow.commit()

            state = "verified" if verified else "unverified"
            return Return.ok(
                SetVerificationResponse(
                    message=f"{role.value.capitalize()} {state} successfully",
                    user=to_user_info(user),
                )
            )
