import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from eventuraa.app.repositories.audit_event_repository import IAuditEventRepository
from eventuraa.domain.entities import AuditEvent


def encode_cursor(event: AuditEvent) -> str:
    raw = f"{event.created_at.isoformat()}|{event.id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> Tuple[datetime, UUID]:
    """Raises ValueError for anything encode_cursor did not produce"""
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8")
        created_at, event_id = raw.split("|")
        return datetime.fromisoformat(created_at), UUID(event_id)
    except (UnicodeError, ValueError, TypeError) as e:
        raise ValueError(f"Malformed audit cursor: {cursor!r}") from e


class AuditEventRepository(IAuditEventRepository):
    """
    Audit log in SQL.

    Pages are keyed on (created_at, id) so rows sharing a timestamp are
    neither skipped nor repeated between pages.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        self.session.add(audit_event)
        await self.session.flush()
        return audit_event

    async def get_page(
        self, limit: int, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        stmt = select(AuditEvent)
        if cursor:
            created_at, event_id = decode_cursor(cursor)
            stmt = stmt.where(
                or_(
                    AuditEvent.created_at < created_at,
                    and_(AuditEvent.created_at == created_at, AuditEvent.id < event_id),
                )
            )
        stmt = stmt.order_by(AuditEvent.created_at.desc(), AuditEvent.id.desc()).limit(limit + 1)

        events = list((await self.session.exec(stmt)).all())
        if len(events) <= limit:
            return events, None
        page = events[:limit]
        return page, encode_cursor(page[-1])
