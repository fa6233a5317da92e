"""
Email OTP challenge service

Issuer:   request_challenge() validates the address against the university
          directory, stores a hashed 6-digit code and emails it.
Verifier: verify_challenge() consumes the outstanding challenge.
Reaper:   sweep_expired_otps() deletes expired challenges and debug records.

The database is the only coordination point. A verify racing a new request
for the same email may check against either the old or the new code
(last write wins on the record); this is accepted.
"""
import logging
from datetime import datetime
from typing import Callable, Optional
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.security import email_fingerprint, hash_otp, verify_otp_hash
from app.services.challenge_store import ChallengeStore
from app.services.debug_sink import DebugCodeSink, DatabaseDebugSink
from app.services.errors import (
    otp_boundary,
    InvalidArgumentError,
    NotFoundError,
    DeadlineExceededError,
    ResourceExhaustedError,
    InternalError,
)
from app.services.universities import get_university
from app.utils.datetime_utils import utcnow
from app.utils.email import send_email
from app.utils.email_templates import OTP_EMAIL_SUBJECT, render_otp_email
from app.utils.email_validator import validate_academic_email, email_domain, normalize_email
from app.utils.otp import generate_otp, get_otp_expiry, is_otp_expired, is_valid_otp_format

logger = logging.getLogger(__name__)

# Re-reads allowed when a compare-and-set loses to a concurrent request
CAS_RETRIES = 5

EmailSender = Callable[[str, str, str, str], bool]


class OtpService:
    def __init__(
        self,
        db: Session,
        sender: EmailSender = send_email,
        debug_sink: Optional[DebugCodeSink] = None,
        now: Callable[[], datetime] = utcnow,
        code_generator: Callable[[], str] = generate_otp,
        max_attempts: Optional[int] = None,
    ):
        self.db = db
        self.store = ChallengeStore(db)
        self.sender = sender
        self.debug_sink = debug_sink
        self.now = now
        self.code_generator = code_generator
        self.max_attempts = max_attempts or settings.OTP_MAX_ATTEMPTS

    # ==================== Issuer ====================

    @otp_boundary("Failed to send OTP. Please try again.")
    def request_challenge(self, email: str, university_id: str) -> dict:
        """
        Issue a fresh challenge for email, replacing any earlier one

        Returns: {'success': True, 'message': str, 'debug': Optional[str], 'delivered': bool}
        """
        if not email or not university_id:
            raise InvalidArgumentError("Email and university ID are required")

        is_valid, normalized = validate_academic_email(email)
        if not is_valid:
            raise InvalidArgumentError("Invalid .edu email address")

        university = get_university(self.db, university_id)
        if university is None:
            raise NotFoundError("University not found")

        if not university.accepts_domain(email_domain(normalized)):
            raise InvalidArgumentError("Email domain does not match selected university")

        code = self.code_generator()
        now = self.now()
        expires_at = get_otp_expiry(now)
        fingerprint = email_fingerprint(normalized)

        self.store.put(fingerprint, hash_otp(code), expires_at, created_at=now)
        logger.info(f"[OTP] Challenge issued for {fingerprint[:12]} ({university.id}), expires {expires_at}")

        delivered = self._deliver(normalized, code, university.name)

        debug = None
        if not delivered:
            if self.debug_sink is not None:
                debug = self._store_debug_code(normalized, code, university.id, expires_at)
            if debug is None:
                logger.warning(f"[OTP] Email delivery not confirmed for {fingerprint[:12]}")
                debug = "Email delivery could not be confirmed"

        return {
            "success": True,
            "message": "OTP sent successfully",
            "debug": debug,
            "delivered": delivered,
        }

    def _store_debug_code(self, email: str, code: str, university_id: str, expires_at: datetime) -> Optional[str]:
        try:
            self.debug_sink.store(email, code, university_id, expires_at)
        except Exception as e:
            # The stored challenge stays valid; only the debug copy is lost
            self.db.rollback()
            logger.error(f"[OTP] Debug code sink failed: {e}")
            return None
        return "Email not delivered, OTP stored in email_otps_debug"

    def _deliver(self, email: str, code: str, university_name: str) -> bool:
        html, text = render_otp_email(code, university_name)
        try:
            return bool(self.sender(email, OTP_EMAIL_SUBJECT, text, html))
        except Exception as e:
            # Delivery failures never roll back the stored challenge
            logger.error(f"[OTP] Email transport raised: {e}")
            return False

    # ==================== Verifier ====================

    @otp_boundary("Failed to verify OTP. Please try again.")
    def verify_challenge(self, email: str, otp: str) -> dict:
        """
        Consume the outstanding challenge for email

        Returns: {'success': True, 'message': str}
        """
        if not email or not otp:
            raise InvalidArgumentError("Email and OTP are required")

        if not is_valid_otp_format(otp):
            raise InvalidArgumentError("Invalid OTP format")

        fingerprint = email_fingerprint(email)

        for _ in range(CAS_RETRIES):
            record = self.store.get(fingerprint)
            if record is None:
                raise NotFoundError("No OTP found for this email. Please request a new one.")

            if is_otp_expired(record.expires_at, self.now()):
                self.store.delete(fingerprint, record.otp_hash)
                raise DeadlineExceededError("OTP has expired. Please request a new one.")

            if record.tries >= self.max_attempts:
                self.store.delete(fingerprint, record.otp_hash)
                raise ResourceExhaustedError("Too many failed attempts. Please request a new OTP.")

            if verify_otp_hash(otp, record.otp_hash):
                if not self.store.delete(fingerprint, record.otp_hash):
                    # Consumed or replaced concurrently
                    continue
                if self.debug_sink is not None:
                    self.debug_sink.discard(email)
                logger.info(f"[OTP] Email verified for {fingerprint[:12]}")
                return {"success": True, "message": "Email verified successfully"}

            prior_tries = record.tries
            if not self.store.increment_tries(fingerprint, record.otp_hash, prior_tries):
                continue

            remaining = (self.max_attempts - 1) - prior_tries
            raise InvalidArgumentError(
                f"Invalid OTP. {remaining} attempts remaining.",
                details={"attempts_remaining": remaining},
            )

        raise InternalError("Failed to verify OTP. Please try again.")


# ==================== Reaper ====================

def sweep_expired_otps(db: Session, now: Callable[[], datetime] = utcnow) -> dict:
    """
    Delete expired challenges and debug records

    Returns: {'deleted_count': int, 'otps': int, 'debug': int}
    """
    current = now()
    otps = ChallengeStore(db).delete_expired(current)
    debug = DatabaseDebugSink(db).delete_expired(current)
    logger.info(f"[CLEANUP] Cleaned up {otps + debug} expired OTPs")
    return {"deleted_count": otps + debug, "otps": otps, "debug": debug}


def get_debug_code(db: Session, email: str, now: Optional[datetime] = None) -> Optional[str]:
    """Pending plaintext code for email, if one was kept"""
    record = DatabaseDebugSink(db).get(normalize_email(email), now or utcnow())
    return record.otp if record else None


def build_otp_service(db: Session) -> OtpService:
    """Service wired from settings; the debug sink exists only in debug mode"""
    debug_sink = DatabaseDebugSink(db) if settings.OTP_DEBUG_MODE else None
    return OtpService(db, debug_sink=debug_sink)
