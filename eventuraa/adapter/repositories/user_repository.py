from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.errors import DuplicateRecordError
from eventuraa.app.repositories.user_repository import IUserRepository
from eventuraa.domain.entities import ProfessionalProfile, User, UserRole


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_professional_reg_number(self, reg_number: str) -> Optional[User]:
        """Get the professional holding a registration number"""
        stmt = (
            select(User)
            .join(ProfessionalProfile, ProfessionalProfile.user_id == User.id)
            .where(ProfessionalProfile.reg_number == reg_number)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user; the profile is saved through the relationship cascade"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        return user

    async def list_by_role(self, role: UserRole) -> List[User]:
        """All users with a role, newest first"""
        stmt = select(User).where(User.role == role).order_by(User.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())
