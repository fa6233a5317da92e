"""
Hashing helpers for OTP storage
Neither the email address nor the code is persisted in the clear
"""
import hashlib
import hmac

from app.utils.email_validator import normalize_email


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def email_fingerprint(email: str) -> str:
    """Deterministic document key for an email address (sha256 of the normalized form)"""
    return sha256_hex(normalize_email(email))


def hash_otp(code: str) -> str:
    """Hash OTP code before saving"""
    return sha256_hex(code)


def verify_otp_hash(code: str, otp_hash: str) -> bool:
    """Constant-time comparison of a submitted code against the stored hash"""
    return hmac.compare_digest(hash_otp(code), otp_hash or "")
