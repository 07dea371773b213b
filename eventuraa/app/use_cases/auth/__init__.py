"""
Authentication Use Cases

Registration variants, sign-in, profile and password reset.
"""

from .register_use_case import (
    RegistrationUseCase,
    UserRegistrationUseCase,
    OrganizerRegistrationUseCase,
    ProfessionalRegistrationUseCase,
    AdminRegistrationUseCase,
)
from .signin_use_case import SignInUseCase
from .load_profile_use_case import LoadProfileUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .signup_dto import (
    SignupCommand,
    OrganizerSignupCommand,
    ProfessionalSignupCommand,
    AdminSignupCommand,
)
from .dtos import (
    AuthResponse,
    ProfileResponse,
    UserInfo,
    OrganizerInfo,
    ProfessionalInfo,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
    to_user_info,
)

__all__ = [
    # Use Cases
    "RegistrationUseCase",
    "UserRegistrationUseCase",
    "OrganizerRegistrationUseCase",
    "ProfessionalRegistrationUseCase",
    "AdminRegistrationUseCase",
    "SignInUseCase",
    "LoadProfileUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "SignupCommand",
    "OrganizerSignupCommand",
    "ProfessionalSignupCommand",
    "AdminSignupCommand",
    # DTOs - Responses
    "AuthResponse",
    "ProfileResponse",
    "UserInfo",
    "OrganizerInfo",
    "ProfessionalInfo",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
    "to_user_info",
]
