"""
Audit Use Cases

All audit-related business logic.
"""

from .get_audit_events_use_case import (
    GetAuditEventsUseCase,
    AuditEventInfo,
    AuditEventsResponse,
)

__all__ = [
    "GetAuditEventsUseCase",
    "AuditEventInfo",
    "AuditEventsResponse",
]
