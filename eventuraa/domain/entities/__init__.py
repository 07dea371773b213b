"""
Eventuraa Domain Entities

All domain entities organized by model.
Each entity in its own file.
"""

# Export all enums
from .enums import (
    UserRole,
    ApprovalStatus,
    EventCategory,
)

# Export all entities
from .user import User
from .organizer_profile import OrganizerProfile
from .professional_profile import ProfessionalProfile
from .event import Event, TicketTier
from .reservation import Reservation
from .audit_event import AuditEvent
from .password_reset_token import PasswordResetToken

__all__ = [
    # Enums
    "UserRole",
    "ApprovalStatus",
    "EventCategory",
    # Entities
    "User",
    "OrganizerProfile",
    "ProfessionalProfile",
    "Event",
    "TicketTier",
    "Reservation",
    "AuditEvent",
    "PasswordResetToken",
]
