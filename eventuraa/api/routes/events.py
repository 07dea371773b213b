"""
Event API Routes

Public reads, organizer management (verified organizers only) and ticket
reservations.
"""

from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from eventuraa.api.error import raise_for_error
from eventuraa.app.services.authorization_gate import Principal
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.app.use_cases.events import (
    CreateEventUseCase,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventChanges,
    EventDraft,
    EventListResponse,
    EventResponse,
    GetOrganizerEventUseCase,
    GetPublicEventUseCase,
    ListOrganizerEventsUseCase,
    ListPublicEventsUseCase,
    ReservationResponse,
    ReserveTicketsUseCase,
    UpdateEventUseCase,
)
from eventuraa.depends import get_current_user, get_unit_of_work, require_verified_organizer

router = APIRouter(prefix="/events", tags=["Events"])


# ============================================================================
# Organizer
# ============================================================================


@router.get(
    "/organizer/events",
    status_code=status.HTTP_200_OK,
    response_model=EventListResponse,
)
async def list_organizer_events(
    organizer: Principal = Depends(require_verified_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The organizer's own events, every approval status"""
    use_case = ListOrganizerEventsUseCase(uow)
    result = await use_case.execute(organizer.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/organizer/{event_id}",
    status_code=status.HTTP_200_OK,
    response_model=EventResponse,
)
async def get_organizer_event(
    event_id: UUID,
    organizer: Principal = Depends(require_verified_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    One of the organizer's own events

    Raises:
        - 403 Forbidden: Event belongs to another organizer
        - 404 Not Found: No such event
    """
    use_case = GetOrganizerEventUseCase(uow)
    result = await use_case.execute(event_id, organizer.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse)
async def create_event(
    draft: EventDraft,
    organizer: Principal = Depends(require_verified_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Event

    The event starts pending review; approvalStatus and sold counters in the
    body are ignored.

    Raises:
        - 403 Forbidden: Not an organizer, or organizer not yet verified
        - 422 Unprocessable Entity: Invalid fields, as errors [{param, msg}]
    """
    use_case = CreateEventUseCase(uow)
    result = await use_case.execute(organizer.id, draft)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def update_event(
    event_id: UUID,
    changes: EventChanges,
    organizer: Principal = Depends(require_verified_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Event

    Only title, description, date, time, location, category, images,
    published and tickets are applied.

    Raises:
        - 403 Forbidden: Caller does not own the event
        - 404 Not Found: No such event
        - 422 Unprocessable Entity: Invalid fields or tier changes
    """
    use_case = UpdateEventUseCase(uow)
    result = await use_case.execute(event_id, organizer.id, changes)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{event_id}", status_code=status.HTTP_200_OK, response_model=DeleteEventResponse)
async def delete_event(
    event_id: UUID,
    organizer: Principal = Depends(require_verified_organizer),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete one of the organizer's own events"""
    use_case = DeleteEventUseCase(uow)
    result = await use_case.execute(event_id, organizer.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Public
# ============================================================================


@router.get("", status_code=status.HTTP_200_OK, response_model=EventListResponse)
async def list_events(
    category: Optional[str] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Approved and published events, latest date first"""
    use_case = ListPublicEventsUseCase(uow)
    result = await use_case.execute(category)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def get_event(event_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Public event detail

    Raises:
        - 404 Not Found: Missing, not approved, or unpublished
    """
    use_case = GetPublicEventUseCase(uow)
    result = await use_case.execute(event_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ReservationRequest(CamelModel):
    tier_name: Optional[str] = None
    count: Any = None


@router.post(
    "/{event_id}/reservations",
    status_code=status.HTTP_201_CREATED,
    response_model=ReservationResponse,
)
async def reserve_tickets(
    event_id: UUID,
    request: ReservationRequest,
    principal: Principal = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reserve Tickets

    Raises:
        - 404 Not Found: Event not public, or no tier with that name
        - 409 Conflict: Not enough tickets left (OUT_OF_STOCK)
    """
    use_case = ReserveTicketsUseCase(uow)
    result = await use_case.execute(event_id, principal.id, request.tier_name, request.count)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
