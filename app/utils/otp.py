"""
OTP generation and verification utilities
"""
import re
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional
from app.core.config import settings
from app.utils.datetime_utils import utcnow


def generate_otp(randbelow: Callable[[int], int] = secrets.randbelow) -> str:
    """
    Generate random OTP code

    Returns: OTP_LENGTH-digit code (string) without a leading zero,
    e.g. 100000-999999 for the default length of 6
    """
    length = settings.OTP_LENGTH
    low = 10 ** (length - 1)
    high = 10 ** length
    return str(low + randbelow(high - low))


def get_otp_expiry(now: Optional[datetime] = None) -> datetime:
    """Get expiry datetime for OTP"""
    now = now or utcnow()
    return now + timedelta(seconds=settings.OTP_EXPIRY)


def is_otp_expired(expires_at: datetime, now: Optional[datetime] = None) -> bool:
    """Check if OTP is expired"""
    now = now or utcnow()
    return now >= expires_at


def is_valid_otp_format(code: str) -> bool:
    """Exactly OTP_LENGTH ASCII digits"""
    if not isinstance(code, str):
        return False
    return re.fullmatch(rf"[0-9]{{{settings.OTP_LENGTH}}}", code) is not None
