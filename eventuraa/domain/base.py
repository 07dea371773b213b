from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns (no tz stored)"""
    return datetime.now(UTC).replace(tzinfo=None)
