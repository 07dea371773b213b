"""
Reserve Tickets Use Case

Takes tickets from one tier of a public event without ever overselling.
"""

import logging
from typing import Any, Optional
from uuid import UUID

from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import FieldError, is_blank, validation_failed
from eventuraa.domain.entities import AuditEvent, Reservation
from eventuraa.libs.result import Error, Result, Return
from .dtos import ReservationResponse, to_reservation_info, to_tier_info
from .public_events_use_case import is_publicly_visible
from .update_event_use_case import event_not_found
from .validation import MAX_TICKET_QUANTITY

logger = logging.getLogger(__name__)


class ReserveTicketsUseCase:
    """
    Use case for reserving tickets.

    Business Rules:
    - count is a whole number between 1 and MAX_TICKET_QUANTITY
    - A count above the tier size is OUT_OF_STOCK without touching the store
    - Event must be publicly visible (approved + published)
    - sold moves only through one conditional UPDATE
      (sold + count <= quantity), so N concurrent calls against quantity Q
      succeed exactly min(N, Q) times
    - A reservation row is written only after the increment succeeded
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        event_id: UUID,
        user_id: UUID,
        tier_name: Optional[str],
        count: Any,
    ) -> Result[ReservationResponse]:
        """
        Errors:
            - VALIDATION_FAILED: missing tier name or bad count
            - EVENT_NOT_FOUND: no such public event
            - TIER_NOT_FOUND: event has no tier with that name
            - OUT_OF_STOCK: not enough tickets left
        """
        errors = []
        if is_blank(tier_name):
            errors.append(FieldError(param="tierName", msg="Please select a ticket type"))
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            errors.append(FieldError(param="count", msg="count must be a whole number of at least 1"))
        elif count > MAX_TICKET_QUANTITY:
            errors.append(FieldError(param="count", msg=f"count cannot be more than {MAX_TICKET_QUANTITY}"))
        if errors:
            return Return.err(validation_failed(errors))

        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None or not is_publicly_visible(event):
                return Return.err(event_not_found())

            tier = event.find_tier(tier_name.strip())
            if tier is None:
                return Return.err(Error("TIER_NOT_FOUND", f"Ticket type '{tier_name}' not found"))

            reserved = count <= tier.quantity and await self.uow.ticket_tiers.try_increment_sold(tier.id, count)
            if not reserved:
                logger.info(f"Reservation of {count} from tier {tier.id} rejected: out of stock")
                return Return.err(
                    Error("OUT_OF_STOCK", f"Not enough '{tier.name}' tickets available")
                )

            tier = await self.uow.ticket_tiers.get_by_id(tier.id)
            reservation = await self.uow.reservations.create(
                Reservation(
                    event_id=event.id,
                    tier_id=tier.id,
                    tier_name=tier.name,
                    user_id=user_id,
                    count=count,
                    unit_price=tier.price,
                    total_price=tier.price * count,
                )
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user_id,
                    action="tickets_reserved",
                    event_metadata={
                        "event_id": str(event.id),
                        "tier": tier.name,
                        "count": count,
                    },
                )
            )
            await self.uow.commit()

            return Return.ok(
                ReservationResponse(
                    reservation=to_reservation_info(reservation),
                    tier=to_tier_info(tier),
                )
            )
