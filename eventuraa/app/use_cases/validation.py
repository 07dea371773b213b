"""
Field validation shared by the registration and event use cases.

Validators append to an error list instead of failing fast, so a client
receives every problem with its input in one response.
"""

import re
from typing import Any, List, Optional

from pydantic import BaseModel

from eventuraa.libs.result import Error

EMAIL_PATTERN = re.compile(r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}", re.ASCII)
PHONE_PATTERN = re.compile(r"\+94\s\d{2}\s\d{3}\s\d{4}", re.ASCII)

NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_BYTES = 72


class FieldError(BaseModel):
    """One invalid input field, in the shape clients render"""

    param: str
    msg: str


def validation_failed(errors: List[FieldError]) -> Error:
    return Error("VALIDATION_FAILED", "Validation failed", details=list(errors))


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def validate_name(name: Optional[str], errors: List[FieldError]) -> None:
    if is_blank(name):
        errors.append(FieldError(param="name", msg="Please provide a name"))
    elif len(name.strip()) > NAME_MAX_LENGTH:
        errors.append(
            FieldError(param="name", msg=f"Name cannot be more than {NAME_MAX_LENGTH} characters")
        )


def validate_email(email: Optional[str], errors: List[FieldError]) -> None:
    if is_blank(email):
        errors.append(FieldError(param="email", msg="Please provide an email"))
    elif not EMAIL_PATTERN.fullmatch(email):
        errors.append(FieldError(param="email", msg="Please provide a valid email address"))


def validate_phone(phone: Optional[str], errors: List[FieldError]) -> None:
    """Optional; checked only when present"""
    if is_blank(phone):
        return
    if not PHONE_PATTERN.fullmatch(phone):
        errors.append(
            FieldError(param="phone", msg="Phone number must be in format: +94 XX XXX XXXX")
        )


def validate_password(
    password: Optional[str], errors: List[FieldError], param: str = "password"
) -> None:
    if not password:
        errors.append(FieldError(param=param, msg="Please provide a password"))
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append(
            FieldError(param=param, msg=f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        )
    elif len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(
            FieldError(param=param, msg=f"Password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
        )


def require(value: Any, param: str, msg: str, errors: List[FieldError]) -> None:
    if is_blank(value):
        errors.append(FieldError(param=param, msg=msg))
