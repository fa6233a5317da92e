"""
Database Models
"""
from .university import University
from .otp import EmailOtp, EmailOtpDebug

__all__ = [
    "University",
    "EmailOtp",
    "EmailOtpDebug",
]

# Export Base from database
from app.core.database import Base
