"""
Services
"""
from .errors import (
    OtpError,
    InvalidArgumentError,
    NotFoundError,
    DeadlineExceededError,
    ResourceExhaustedError,
    InternalError,
    PermissionDeniedError,
)
from .otp import OtpService, build_otp_service, sweep_expired_otps, get_debug_code

__all__ = [
    "OtpError",
    "InvalidArgumentError",
    "NotFoundError",
    "DeadlineExceededError",
    "ResourceExhaustedError",
    "InternalError",
    "PermissionDeniedError",
    "OtpService",
    "build_otp_service",
    "sweep_expired_otps",
    "get_debug_code",
]
