"""
Admin API Routes - Moderation Endpoints

Event review queue, organizer / professional verification and the audit
log. Every endpoint requires a signed-in admin.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from eventuraa.api.error import raise_for_error
from eventuraa.app.services.authorization_gate import Principal
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.admin import (
    ListOrganizersResponse,
    ListOrganizersUseCase,
    SetVerificationResponse,
    SetVerificationUseCase,
)
from eventuraa.app.use_cases.audit import AuditEventsResponse, GetAuditEventsUseCase
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.app.use_cases.events import (
    EventListResponse,
    EventResponse,
    GetEventForAdminUseCase,
    ListAllEventsUseCase,
    ListPendingEventsUseCase,
    PendingEventsResponse,
    ReviewEventUseCase,
)
from eventuraa.depends import get_unit_of_work, require_roles
from eventuraa.domain.entities import UserRole

router = APIRouter(prefix="/admin", tags=["Admin"])

require_admin = require_roles(UserRole.admin)


# ============================================================================
# Events
# ============================================================================


@router.get("/events", status_code=status.HTTP_200_OK, response_model=EventListResponse)
async def list_all_events(
    approval_status: Optional[str] = Query(None, alias="status"),
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """All events, optionally filtered by ?status=pending|approved|rejected"""
    use_case = ListAllEventsUseCase(uow)
    result = await use_case.execute(approval_status)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/events/pending", status_code=status.HTTP_200_OK, response_model=PendingEventsResponse
)
async def list_pending_events(
    page: int = Query(1),
    page_size: int = Query(20, alias="pageSize"),
    order: str = Query("newest"),
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review queue

    Paginated pending events ordered by creation time, newest (default) or
    oldest first.
    """
    use_case = ListPendingEventsUseCase(uow)
    result = await use_case.execute(page=page, page_size=page_size, order=order)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/events/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Any event, any status"""
    use_case = GetEventForAdminUseCase(uow)
    result = await use_case.execute(event_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ReviewRequest(CamelModel):
    status: Optional[str] = None
    review_notes: Optional[str] = None


@router.put(
    "/events/{event_id}/review", status_code=status.HTTP_200_OK, response_model=EventResponse
)
async def review_event(
    event_id: UUID,
    request: ReviewRequest,
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Review Event

    Raises:
        - 404 Not Found: No such event
        - 409 Conflict: Event was already reviewed
        - 422 Unprocessable Entity: status is not approved/rejected
    """
    use_case = ReviewEventUseCase(uow)
    result = await use_case.execute(event_id, admin.id, request.status, request.review_notes)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


# ============================================================================
# Accounts
# ============================================================================


@router.get(
    "/organizers",
    status_code=status.HTTP_200_OK,
    response_model=ListOrganizersResponse,
    response_model_exclude_none=True,
)
async def list_organizers(
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Organizers with their verification flag"""
    use_case = ListOrganizersUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class VerifyRequest(CamelModel):
    is_verified: bool


async def _set_verification(
    user_id: UUID, request: VerifyRequest, role: UserRole, admin: Principal, uow: UnitOfWork
):
    use_case = SetVerificationUseCase(uow)
    result = await use_case.execute(user_id, request.is_verified, role, admin.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/organizers/{user_id}/verify",
    status_code=status.HTTP_200_OK,
    response_model=SetVerificationResponse,
    response_model_exclude_none=True,
)
async def verify_organizer(
    user_id: UUID,
    request: VerifyRequest,
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify or un-verify an organizer

    Raises:
        - 400 Bad Request: User is not an organizer (ROLE_MISMATCH)
        - 404 Not Found: No such user
    """
    return await _set_verification(user_id, request, UserRole.organizer, admin, uow)


@router.put(
    "/professionals/{user_id}/verify",
    status_code=status.HTTP_200_OK,
    response_model=SetVerificationResponse,
    response_model_exclude_none=True,
)
async def verify_professional(
    user_id: UUID,
    request: VerifyRequest,
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Verify or un-verify a professional"""
    return await _set_verification(user_id, request, UserRole.professional, admin, uow)


# ============================================================================
# Audit log
# ============================================================================


@router.get("/audit-events", status_code=status.HTTP_200_OK, response_model=AuditEventsResponse)
async def get_audit_events(
    limit: int = Query(50),
    cursor: Optional[str] = Query(None),
    admin: Principal = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Audit log, newest first; pass nextCursor back as ?cursor= for the next page"""
    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(limit=limit, cursor=cursor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
