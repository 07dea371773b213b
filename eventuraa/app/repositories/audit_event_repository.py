from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from eventuraa.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """Append-only audit log"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        pass

    @abstractmethod
    async def get_page(
        self, limit: int, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        One page of the log, newest first.

        Args:
            limit: Page size
            cursor: Opaque value from a previous page, None for the first page

        Returns:
            (events, next_cursor); next_cursor is None on the last page

        Raises:
            ValueError: cursor was not produced by this repository
        """
        pass
