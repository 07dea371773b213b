"""
Use Cases

Organized into domain folders:
- auth/: Registration, sign-in, profile and password reset
- events/: Event lifecycle and ticket reservations
- admin/: Organizer and professional verification
- audit/: Audit log

Shared pieces live beside them: base_dto (camelCase DTO base) and
validation (field rules).
"""

from .auth import (
    UserRegistrationUseCase,
    OrganizerRegistrationUseCase,
    ProfessionalRegistrationUseCase,
    AdminRegistrationUseCase,
    SignInUseCase,
    LoadProfileUseCase,
)
from .events import (
    CreateEventUseCase,
    UpdateEventUseCase,
    DeleteEventUseCase,
    ReviewEventUseCase,
    ReserveTicketsUseCase,
)
from .admin import (
    ListOrganizersUseCase,
    SetVerificationUseCase,
)
from .audit import (
    GetAuditEventsUseCase,
)

__all__ = [
    # Auth
    "UserRegistrationUseCase",
    "OrganizerRegistrationUseCase",
    "ProfessionalRegistrationUseCase",
    "AdminRegistrationUseCase",
    "SignInUseCase",
    "LoadProfileUseCase",
    # Events
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "DeleteEventUseCase",
    "ReviewEventUseCase",
    "ReserveTicketsUseCase",
    # Admin
    "ListOrganizersUseCase",
    "SetVerificationUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
