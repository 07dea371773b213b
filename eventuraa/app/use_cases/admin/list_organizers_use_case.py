"""
Use Case: List Organizers

Admin view of every organizer account with its verification flag.
"""

from typing import List

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.auth.dtos import UserInfo, to_user_info
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.domain.entities import UserRole
from eventuraa.libs.result import Result, Return


class ListOrganizersResponse(CamelModel):
    """Response DTO for ListOrganizersUseCase"""

    success: bool = True
    count: int
    organizers: List[UserInfo]


class ListOrganizersUseCase:
    """Organizers, newest accounts first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListOrganizersResponse]:
        async with self.uow:
            organizers = await self.uow.users.list_by_role(UserRole.organizer)
            infos = [to_user_info(user) for user in organizers]
            return Return.ok(ListOrganizersResponse(count=len(infos), organizers=infos))
