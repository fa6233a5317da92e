"""
Utility Functions
"""
from .email_validator import validate_academic_email, normalize_email, email_domain
from .otp import generate_otp, get_otp_expiry, is_otp_expired, is_valid_otp_format

__all__ = [
    "validate_academic_email",
    "normalize_email",
    "email_domain",
    "generate_otp",
    "get_otp_expiry",
    "is_otp_expired",
    "is_valid_otp_format",
]
