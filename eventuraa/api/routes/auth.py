from datetime import timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from eventuraa.api.error import raise_for_error
from eventuraa.app.services.authorization_gate import Principal
from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.app.use_cases.auth import (
    AdminRegistrationUseCase,
    AdminSignupCommand,
    AuthResponse,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    LoadProfileUseCase,
    OrganizerRegistrationUseCase,
    OrganizerSignupCommand,
    ProfessionalRegistrationUseCase,
    ProfessionalSignupCommand,
    ProfileResponse,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    SignInUseCase,
    SignupCommand,
    UserRegistrationUseCase,
)
from eventuraa.depends import (
    get_current_user,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(CamelModel):
    """
    Signup HTTP request payload

    Field rules are checked by the registration use case so that every
    problem is reported in one response.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class OrganizerSignupRequest(SignupRequest):
    company: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None


class ProfessionalSignupRequest(SignupRequest):
    reg_number: Optional[str] = None
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    hospital: Optional[str] = None
    experience: Optional[int] = None
    languages: List[str] = []


class AdminSignupRequest(SignupRequest):
    admin_secret_key: Optional[str] = None


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    """
    User Signup

    Raises:
        - 400 Bad Request: Email already registered
        - 422 Unprocessable Entity: Invalid fields, as errors [{param, msg}]
    """
    use_case = UserRegistrationUseCase(uow, hasher, tokens)
    result = await use_case.execute(SignupCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/organizer/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def organizer_signup(
    request: OrganizerSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    """
    Organizer Signup

    Creates an organizer with an unverified profile. Event management stays
    locked until an admin verifies the organizer.
    """
    use_case = OrganizerRegistrationUseCase(uow, hasher, tokens)
    result = await use_case.execute(OrganizerSignupCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/doctor/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
@router.post(
    "/professional/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def professional_signup(
    request: ProfessionalSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    """
    Professional Signup

    Raises:
        - 400 Bad Request: Email or registration number already registered
        - 422 Unprocessable Entity: Invalid fields
    """
    use_case = ProfessionalRegistrationUseCase(uow, hasher, tokens)
    result = await use_case.execute(ProfessionalSignupCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/admin/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def admin_signup(
    request: AdminSignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    """
    Admin Signup

    Requires adminSecretKey equal to ADMIN_SIGNUP_SECRET.

    Raises:
        - 401 Unauthorized: Wrong admin secret (checked before any field)
    """
    use_case = AdminRegistrationUseCase(
        uow, hasher, tokens, admin_signup_secret=ApplicationConfig.ADMIN_SIGNUP_SECRET
    )
    result = await use_case.execute(AdminSignupCommand(**request.model_dump()))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class SignInRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.post(
    "/signin",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def signin(
    request: SignInRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: SessionTokenService = Depends(get_token_service),
):
    """
    Sign In

    Raises:
        - 401 Unauthorized: Same payload for unknown email and wrong password
    """
    use_case = SignInUseCase(uow, hasher, tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/profile",
    status_code=status.HTTP_200_OK,
    response_model=ProfileResponse,
    response_model_exclude_none=True,
)
async def profile(
    principal: Principal = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Role-shaped profile of the signed-in user"""
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(principal.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RequestPasswordResetRequest(CamelModel):
    email: Optional[str] = None


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Password Reset

    Always answers the same message, whether or not the email exists.
    """
    use_case = RequestPasswordResetUseCase(
        uow, ttl=timedelta(minutes=ApplicationConfig.PASSWORD_RESET_TTL_MINUTES)
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ConfirmPasswordResetRequest(CamelModel):
    token: Optional[str] = None
    new_password: Optional[str] = None


@router.post(
    "/confirm-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Unknown token
        - 409 Conflict: Token already used
        - 410 Gone: Token expired
        - 422 Unprocessable Entity: New password does not meet the rules
    """
    use_case = ConfirmPasswordResetUseCase(uow, hasher)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
