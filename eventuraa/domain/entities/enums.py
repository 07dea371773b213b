"""
Eventuraa Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role. Fixed at signup, never changed in place."""

    user = "user"
    organizer = "organizer"
    professional = "professional"
    property_owner = "property-owner"
    admin = "admin"


class ApprovalStatus(str, Enum):
    """Event approval state"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class EventCategory(str, Enum):
    """Closed set of event categories"""

    cultural = "cultural"
    music = "music"
    sports = "sports"
    culinary = "culinary"
    adventure = "adventure"
    business = "business"
    other = "other"
