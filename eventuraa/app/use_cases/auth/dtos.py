"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the auth domain. The user projection is shaped by
role: organizers carry organizerInfo, professionals carry professionalInfo.
"""

from datetime import datetime
from typing import List, Optional

from eventuraa.app.use_cases.base_dto import CamelModel
from eventuraa.domain.entities import User, UserRole


# ============================================================================
# User projection
# ============================================================================


class OrganizerInfo(CamelModel):
    """Organizer payload of the user projection"""

    company: str
    description: Optional[str] = None
    website: Optional[str] = None
    profile_image: Optional[str] = None
    social: Optional[dict] = None
    is_verified: bool
    member_since: datetime


class ProfessionalInfo(CamelModel):
    """Professional payload of the user projection"""

    reg_number: Optional[str] = None
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    hospital: Optional[str] = None
    experience: Optional[int] = None
    languages: List[str] = []
    photo: Optional[str] = None
    is_verified: bool
    video_consultation_fee: Optional[float] = None
    in_person_fee: Optional[float] = None


class UserInfo(CamelModel):
    """Public view of a user; never includes the password hash"""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    role: str
    created_at: datetime
    organizer_info: Optional[OrganizerInfo] = None
    professional_info: Optional[ProfessionalInfo] = None


def to_user_info(user: User) -> UserInfo:
    """Project a loaded User (profiles included) onto UserInfo"""
    info = UserInfo(
        id=str(user.id),
        name=user.name,
        email=user.email,
        phone=user.phone,
        role=user.role.value,
        created_at=user.created_at,
    )
    if user.role == UserRole.organizer and user.organizer_profile is not None:
        profile = user.organizer_profile
        info.organizer_info = OrganizerInfo(
            company=profile.company,
            description=profile.description,
            website=profile.website,
            profile_image=profile.profile_image,
            social=profile.social,
            is_verified=profile.verified,
            member_since=profile.member_since,
        )
    elif user.role == UserRole.professional and user.professional_profile is not None:
        profile = user.professional_profile
        info.professional_info = ProfessionalInfo(
            reg_number=profile.reg_number,
            specialization=profile.specialization,
            qualification=profile.qualification,
            hospital=profile.hospital,
            experience=profile.experience,
            languages=list(profile.languages or []),
            photo=profile.photo,
            is_verified=profile.verified,
            video_consultation_fee=profile.video_consultation_fee,
            in_person_fee=profile.in_person_fee,
        )
    return info


# ============================================================================
# Response DTOs
# ============================================================================


class AuthResponse(CamelModel):
    """Response for signup and signin use cases"""

    success: bool = True
    token: str
    user: UserInfo


class ProfileResponse(CamelModel):
    """Response for load profile use case"""

    success: bool = True
    user: UserInfo


class RequestPasswordResetResponse(CamelModel):
    """Response for request password reset use case"""

    status: str
    message: str


class ConfirmPasswordResetResponse(CamelModel):
    """Response for confirm password reset use case"""

    status: str
    message: str
