"""
Load Profile Use Case

Returns the role-shaped projection of the signed-in user.
"""

from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.libs.result import Error, Result, Return
from .dtos import ProfileResponse, to_user_info


class LoadProfileUseCase:
    """Use case for GET /auth/profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            return Return.ok(ProfileResponse(user=to_user_info(user)))
