"""
Event draft validation.

Every check appends to the error list; params name the offending field the
way clients address it (`date`, `tickets[1].price`).
"""

from datetime import date as Date
from datetime import datetime
from numbers import Real
from typing import Any, List, Optional

from eventuraa.app.use_cases.validation import FieldError, is_blank
from eventuraa.domain.entities import EventCategory
from .dtos import EventDraft, TicketTierDraft

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 5000
# Largest value the store keeps in an INTEGER column on every backend
MAX_TICKET_QUANTITY = 2**31 - 1

CATEGORIES = [category.value for category in EventCategory]


def parse_event_date(value: Any) -> Optional[Date]:
    """ISO date or datetime string to a date; None if unparseable"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, Date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def validate_title(title: Optional[str], errors: List[FieldError]) -> None:
    if is_blank(title):
        errors.append(FieldError(param="title", msg="Please provide an event title"))
    elif len(title.strip()) > TITLE_MAX_LENGTH:
        errors.append(
            FieldError(param="title", msg=f"Title cannot be more than {TITLE_MAX_LENGTH} characters")
        )


def validate_description(description: Optional[str], errors: List[FieldError]) -> None:
    if is_blank(description):
        errors.append(FieldError(param="description", msg="Please provide an event description"))
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                param="description",
                msg=f"Description cannot be more than {DESCRIPTION_MAX_LENGTH} characters",
            )
        )


def validate_date(value: Any, errors: List[FieldError]) -> None:
    if is_blank(value):
        errors.append(FieldError(param="date", msg="Please provide an event date"))
    elif parse_event_date(value) is None:
        errors.append(FieldError(param="date", msg="Please provide a valid date"))


def validate_category(category: Optional[str], errors: List[FieldError]) -> None:
    if is_blank(category):
        errors.append(FieldError(param="category", msg="Please select a category"))
    elif category not in CATEGORIES:
        errors.append(
            FieldError(param="category", msg=f"Category must be one of: {', '.join(CATEGORIES)}")
        )


def validate_tickets(tickets: Optional[List[TicketTierDraft]], errors: List[FieldError]) -> None:
    if not tickets:
        errors.append(FieldError(param="tickets", msg="Please add at least one ticket type"))
        return

    seen = set()
    for i, tier in enumerate(tickets):
        prefix = f"tickets[{i}]"
        if is_blank(tier.name):
            errors.append(FieldError(param=f"{prefix}.name", msg="Ticket name is required"))
        elif tier.name.strip() in seen:
            errors.append(FieldError(param=f"{prefix}.name", msg="Ticket names must be unique"))
        else:
            seen.add(tier.name.strip())

        if not _is_number(tier.price) or tier.price < 0:
            errors.append(
                FieldError(param=f"{prefix}.price", msg="Ticket price must be a non-negative number")
            )

        if not _is_integer(tier.quantity) or tier.quantity < 1:
            errors.append(
                FieldError(param=f"{prefix}.quantity", msg="Ticket quantity must be a whole number of at least 1")
            )
        elif tier.quantity > MAX_TICKET_QUANTITY:
            errors.append(
                FieldError(param=f"{prefix}.quantity", msg=f"Ticket quantity cannot be more than {MAX_TICKET_QUANTITY}")
            )


def validate_draft(draft: EventDraft) -> List[FieldError]:
    """Full validation for a new event"""
    errors: List[FieldError] = []
    validate_title(draft.title, errors)
    validate_description(draft.description, errors)
    validate_date(draft.event_date, errors)
    if is_blank(draft.time):
        errors.append(FieldError(param="time", msg="Please provide an event time"))
    if is_blank(draft.location):
        errors.append(FieldError(param="location", msg="Please provide an event location"))
    validate_category(draft.category, errors)
    validate_tickets(draft.tickets, errors)
    return errors


def validate_changes(changes: EventDraft, fields: set) -> List[FieldError]:
    """Validate only the fields present in a partial update"""
    errors: List[FieldError] = []
    if "title" in fields:
        validate_title(changes.title, errors)
    if "description" in fields:
        validate_description(changes.description, errors)
    if "event_date" in fields:
        validate_date(changes.event_date, errors)
    if "time" in fields and is_blank(changes.time):
        errors.append(FieldError(param="time", msg="Please provide an event time"))
    if "location" in fields and is_blank(changes.location):
        errors.append(FieldError(param="location", msg="Please provide an event location"))
    if "category" in fields:
        validate_category(changes.category, errors)
    if "published" in fields and changes.published is None:
        errors.append(FieldError(param="published", msg="published must be true or false"))
    if "tickets" in fields:
        validate_tickets(changes.tickets, errors)
    return errors
