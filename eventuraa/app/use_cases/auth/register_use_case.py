"""
Account Registration Use Cases

One workflow, four variants. Every variant validates the shared fields
plus its own, checks uniqueness, hashes the password, stores the identity
with its role profile, audits the signup and issues a session token.
"""

import hmac
from abc import ABC
from typing import List, Optional

from eventuraa.app.repositories.errors import DuplicateRecordError
from eventuraa.app.services.password_hasher import PasswordHasher
from eventuraa.app.services.token_service import SessionTokenService
from eventuraa.app.services.unit_of_work import UnitOfWork
from eventuraa.app.use_cases.validation import (
    FieldError,
    require,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
    validation_failed,
)
from eventuraa.domain.entities import (
    AuditEvent,
    OrganizerProfile,
    ProfessionalProfile,
    User,
    UserRole,
)
from eventuraa.libs.result import Error, Result, Return
from .dtos import AuthResponse, to_user_info
from .signup_dto import (
    AdminSignupCommand,
    OrganizerSignupCommand,
    ProfessionalSignupCommand,
    SignupCommand,
)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class RegistrationUseCase(ABC):
    """
    Shared registration contract.

    Business Logic:
    1. Variant pre-check (admin secret)
    2. Validate name, email, phone, password and variant fields, collecting
       every error
    3. Email must be unused (any role); variant uniqueness rules
    4. Hash password, create User plus role profile
    5. Audit "signup", commit
    6. Issue session token; respond with the role-shaped projection
    """

    role: UserRole = UserRole.user

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: SessionTokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    def _precheck(self, command: SignupCommand) -> Optional[Error]:
        return None

    def _validate_role_fields(self, command: SignupCommand, errors: List[FieldError]) -> None:
        pass

    async def _check_role_uniqueness(self, command: SignupCommand) -> Optional[Error]:
        return None

    def _attach_profile(self, user: User, command: SignupCommand) -> None:
        pass

    def _validate(self, command: SignupCommand) -> List[FieldError]:
        errors: List[FieldError] = []
        validate_name(command.name, errors)
        validate_email(_clean(command.email), errors)
        validate_phone(command.phone, errors)
        validate_password(command.password, errors)
        self._validate_role_fields(command, errors)
        return errors

    async def execute(self, command: SignupCommand) -> Result[AuthResponse]:
        """
        Execute registration

        Returns:
            Result[AuthResponse] with token and user projection, or Error
            (INVALID_ADMIN_SECRET, VALIDATION_FAILED, EMAIL_ALREADY_EXISTS,
            REG_NUMBER_ALREADY_EXISTS)
        """
        precheck_error = self._precheck(command)
        if precheck_error is not None:
            return Return.err(precheck_error)

        errors = self._validate(command)
        if errors:
            return Return.err(validation_failed(errors))

        email = _clean(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User already exists with this email")
                )

            role_error = await self._check_role_uniqueness(command)
            if role_error is not None:
                return Return.err(role_error)

            user = User(
                name=command.name.strip(),
                email=email,
                password_hash=self.password_hasher.hash(command.password),
                phone=_clean(command.phone),
                role=self.role,
            )
            self._attach_profile(user, command)

            try:
                user = await self.uow.users.create(user)
            except DuplicateRecordError as exc:
                # Lost a race against a concurrent signup
                if "reg_number" in str(exc):
                    return Return.err(
                        Error(
                            "REG_NUMBER_ALREADY_EXISTS",
                            "A professional with this registration number already exists",
                        )
                    )
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "User already exists with this email")
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    user_id=user.id,
                    action="signup",
                    event_metadata={"email": email, "role": self.role.value},
                )
            )

            await self.uow.commit()

            response = AuthResponse(
                token=self.token_service.issue(user.id),
                user=to_user_info(user),
            )
            return Return.ok(response)


class UserRegistrationUseCase(RegistrationUseCase):
    """Plain user accounts"""

    role = UserRole.user


class OrganizerRegistrationUseCase(RegistrationUseCase):
    """Organizer accounts; start unverified"""

    role = UserRole.organizer

    def _validate_role_fields(self, command: OrganizerSignupCommand, errors: List[FieldError]) -> None:
        require(command.company, "company", "Please provide your company name", errors)

    def _attach_profile(self, user: User, command: OrganizerSignupCommand) -> None:
        user.organizer_profile = OrganizerProfile(
            user_id=user.id,
            company=command.company.strip(),
            description=command.description,
            website=_clean(command.website),
            verified=False,
        )


class ProfessionalRegistrationUseCase(RegistrationUseCase):
    """Professional (doctor) accounts; registration number is unique"""

    role = UserRole.professional

    def _validate_role_fields(self, command: ProfessionalSignupCommand, errors: List[FieldError]) -> None:
        require(command.reg_number, "regNumber", "Please provide your registration number", errors)

    async def _check_role_uniqueness(self, command: ProfessionalSignupCommand) -> Optional[Error]:
        holder = await self.uow.users.get_by_professional_reg_number(command.reg_number.strip())
        if holder is not None:
            return Error(
                "REG_NUMBER_ALREADY_EXISTS",
                "A professional with this registration number already exists",
            )
        return None

    def _attach_profile(self, user: User, command: ProfessionalSignupCommand) -> None:
        user.professional_profile = ProfessionalProfile(
            user_id=user.id,
            reg_number=command.reg_number.strip(),
            specialization=command.specialization,
            qualification=command.qualification,
            hospital=command.hospital,
            experience=command.experience,
            languages=list(command.languages),
            verified=False,
        )


class AdminRegistrationUseCase(RegistrationUseCase):
    """Administrator accounts; the shared secret is checked before anything else"""

    role = UserRole.admin

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: SessionTokenService,
        admin_signup_secret: str,
    ):
        super().__init__(uow, password_hasher, token_service)
        self.admin_signup_secret = admin_signup_secret

    def _precheck(self, command: AdminSignupCommand) -> Optional[Error]:
        supplied = (command.admin_secret_key or "").encode("utf-8")
        if not self.admin_signup_secret or not hmac.compare_digest(
            supplied, self.admin_signup_secret.encode("utf-8")
        ):
            return Error("INVALID_ADMIN_SECRET", "Invalid admin secret key")
        return None
