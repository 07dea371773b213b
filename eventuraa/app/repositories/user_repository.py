from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from eventuraa.domain.entities import User, UserRole


class IUserRepository(ABC):
    """User repository interface - the credential store"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_professional_reg_number(self, reg_number: str) -> Optional[User]:
        """Get the professional holding a registration number"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user (with its profile, if any).

        Raises:
            DuplicateRecordError: email or registration number already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def list_by_role(self, role: UserRole) -> List[User]:
        """All users with a role, newest first"""
        pass
