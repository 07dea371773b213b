from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from eventuraa.domain.base import utcnow
from eventuraa.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """Reset tokens in SQL; single use is enforced by conditional updates"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        self.session.add(token)
        await self.session.flush()
        return token

    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        result = await self.session.exec(
            select(PasswordResetToken).where(PasswordResetToken.token_hash == token_hash)
        )
        return result.one_or_none()

    async def mark_used(self, token_id: UUID) -> bool:
        stmt = (
            update(PasswordResetToken)
            .where(
                PasswordResetToken.id == token_id,
                PasswordResetToken.used == False,  # noqa: E712
            )
            .values(used=True, used_at=utcnow())
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def invalidate_unused_for_user(self, user_id: UUID) -> int:
        stmt = (
            update(PasswordResetToken)
            .where(
                PasswordResetToken.user_id == user_id,
                PasswordResetToken.used == False,  # noqa: E712
            )
            .values(used=True, used_at=utcnow())
        )
        result = await self.session.execute(stmt)
        return result.rowcount
