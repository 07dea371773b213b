from typing import NoReturn

from fastapi import status

from eventuraa.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Use case error code -> HTTP status. Codes not listed are server errors.
ERROR_STATUS_CODES = {
    # Validation
    "VALIDATION_FAILED": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_REVIEW_STATUS": status.HTTP_422_UNPROCESSABLE_ENTITY,
    # Authentication
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_ADMIN_SECRET": status.HTTP_401_UNAUTHORIZED,
    # Authorization
    "FORBIDDEN_ROLE": status.HTTP_403_FORBIDDEN,
    "ORGANIZER_NOT_VERIFIED": status.HTTP_403_FORBIDDEN,
    "NOT_EVENT_OWNER": status.HTTP_403_FORBIDDEN,
    # Uniqueness
    "EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "REG_NUMBER_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "ROLE_MISMATCH": status.HTTP_400_BAD_REQUEST,
    # State conflicts
    "OUT_OF_STOCK": status.HTTP_409_CONFLICT,
    "EVENT_ALREADY_REVIEWED": status.HTTP_409_CONFLICT,
    # Not found
    "EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TIER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    # Password reset
    "INVALID_TOKEN": status.HTTP_400_BAD_REQUEST,
    "TOKEN_EXPIRED": status.HTTP_410_GONE,
    "TOKEN_ALREADY_USED": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error) -> NoReturn:
    """Raise the HTTP exception matching a use case error"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
