from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from eventuraa.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """Reset token store. Tokens are looked up by hash; the plain value is never stored."""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        pass

    @abstractmethod
    async def mark_used(self, token_id: UUID) -> bool:
        """
        Atomically flip an unused token to used.

        Returns:
            False when the token was already used, so only one of several
            concurrent confirmations can win
        """
        pass

    @abstractmethod
    async def invalidate_unused_for_user(self, user_id: UUID) -> int:
        """Mark every outstanding token of a user as used; returns how many"""
        pass
