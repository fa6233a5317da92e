"""
Email address validation utilities
"""
from app.core.config import settings


def normalize_email(email: str) -> str:
    """Lower-case and strip surrounding whitespace"""
    return (email or "").strip().lower()


def email_domain(email: str) -> str:
    """Substring after the last '@', lower-cased"""
    return normalize_email(email).rsplit("@", 1)[-1]


def validate_academic_email(email: str) -> tuple[bool, str]:
    """
    Validate a student email address

    Returns: (is_valid, normalized_email)
    The address must contain '@' and end with an accepted academic suffix (.edu)
    """
    normalized = normalize_email(email)

    if "@" not in normalized:
        return False, ""

    local, _, domain = normalized.rpartition("@")
    if not local or not domain:
        return False, ""

    if not any(normalized.endswith(suffix) for suffix in settings.academic_suffixes):
        return False, ""

    return True, normalized


def is_valid_academic_email(email: str) -> bool:
    """Quick validation check"""
    is_valid, _ = validate_academic_email(email)
    return is_valid
