"""
AuditEvent Entity

Append-only record of account, moderation and sales actions.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from eventuraa.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    Business Rules:
    - Rows are inserted in the same transaction as the change they record
      and are never updated or deleted
    - user_id is the acting account: the admin for moderation, the buyer
      for reservations
    - event_metadata carries ids and counts only, never secrets
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: Optional[UUID] = Field(default=None, index=True)
    action: str = Field(max_length=64)
    event_metadata: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime, nullable=False))

    __table_args__ = (Index("ix_audit_events_created_id", "created_at", "id"),)
