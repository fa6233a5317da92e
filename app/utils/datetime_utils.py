"""
DateTime utilities
Timestamps are stored as naive UTC
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Get current UTC datetime without tzinfo
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(dt: datetime) -> datetime:
    """
    Convert any datetime to naive UTC
    """
    if dt is None:
        return None

    # Naive values are assumed to be UTC already
    if dt.tzinfo is None:
        return dt

    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def format_datetime(dt: datetime) -> str:
    if dt is None:
        return ""
    return to_naive_utc(dt).strftime("%Y-%m-%d %H:%M:%S")
