"""
Signup Use Case DTOs (Data Transfer Objects)

One command per registration variant. Commands are built by the API layer
from the request body; field rules (name, email, phone, password,
role-specific fields) are enforced by the use case so that every problem
is reported together.
"""

from typing import List, Optional

from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - plain user account

    Contains only business-relevant data (no HTTP concerns).
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class OrganizerSignupCommand(SignupCommand):
    """Signup command for event organizers"""

    company: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None


class ProfessionalSignupCommand(SignupCommand):
    """Signup command for credentialed professionals"""

    reg_number: Optional[str] = None
    specialization: Optional[str] = None
    qualification: Optional[str] = None
    hospital: Optional[str] = None
    experience: Optional[int] = None
    languages: List[str] = []


class AdminSignupCommand(SignupCommand):
    """Signup command for administrators, gated by a shared secret"""

    admin_secret_key: Optional[str] = None
