class DuplicateRecordError(Exception):
    """A write violated a uniqueness constraint (email, registration number)"""


class ConstraintViolationError(Exception):
    """A write violated a CHECK or foreign key constraint at flush time"""
