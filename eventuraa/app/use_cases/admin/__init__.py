"""Admin use cases for account moderation."""

from .list_organizers_use_case import ListOrganizersUseCase, ListOrganizersResponse
from .set_verification_use_case import SetVerificationUseCase, SetVerificationResponse

__all__ = [
    "ListOrganizersUseCase",
    "ListOrganizersResponse",
    "SetVerificationUseCase",
    "SetVerificationResponse",
]
