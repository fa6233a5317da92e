"""
OTP error taxonomy
Each error carries a stable kind and the HTTP status it maps to
"""
import functools
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class OtpError(Exception):
    """Base error surfaced verbatim to the caller"""
    kind = "internal"
    status_code = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        body = {"success": False, "error": self.kind, "message": self.message}
        body.update(self.details)
        return body


class InvalidArgumentError(OtpError):
    kind = "invalid-argument"
    status_code = 400


class NotFoundError(OtpError):
    kind = "not-found"
    status_code = 404


class PermissionDeniedError(OtpError):
    kind = "permission-denied"
    status_code = 403


class DeadlineExceededError(OtpError):
    kind = "deadline-exceeded"
    status_code = 410


class ResourceExhaustedError(OtpError):
    kind = "resource-exhausted"
    status_code = 429


class InternalError(OtpError):
    kind = "internal"
    status_code = 500


def otp_boundary(internal_message: str):
    """
    Log every failure of the wrapped operation and map anything that is
    not an OtpError to InternalError carrying only internal_message
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except OtpError as e:
                logger.warning(f"[OTP] {func.__name__} failed: {e.kind}: {e.message}")
                raise
            except Exception as e:
                logger.exception(f"[OTP] {func.__name__} failed unexpectedly: {e}")
                raise InternalError(internal_message) from e
        return wrapper
    return decorator
