"""
Debug code sink
Keeps the plaintext code when email delivery was not confirmed, so it can be
read back during integration testing. Only wired in when OTP_DEBUG_MODE is on.
"""
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session
from app.models import EmailOtpDebug
from app.utils.email_validator import normalize_email

logger = logging.getLogger(__name__)


class DebugCodeSink:
    """Interface for debug code storage"""

    def store(self, email: str, code: str, university_id: str, expires_at: datetime) -> None:
        raise NotImplementedError

    def discard(self, email: str) -> None:
        raise NotImplementedError


class DatabaseDebugSink(DebugCodeSink):
    """Stores debug codes in email_otps_debug, keyed by normalized email"""

    def __init__(self, db: Session):
        self.db = db

    def store(self, email: str, code: str, university_id: str, expires_at: datetime) -> None:
        email = normalize_email(email)
        values = {"otp": code, "university_id": university_id, "expires_at": expires_at}
        result = self.db.execute(
            update(EmailOtpDebug)
            .where(EmailOtpDebug.email == email)
            .values(**values)
        )
        if result.rowcount == 0:
            self.db.add(EmailOtpDebug(email=email, **values))
        self.db.commit()
        logger.warning(f"[OTP] DEBUG MODE: OTP for {email}: {code}")

    def discard(self, email: str) -> None:
        self.db.execute(
            delete(EmailOtpDebug)
            .where(EmailOtpDebug.email == normalize_email(email))
        )
        self.db.commit()

    def get(self, email: str, now: datetime) -> Optional[EmailOtpDebug]:
        """Pending debug record, or None if missing or expired"""
        stmt = (
            select(EmailOtpDebug)
            .where(EmailOtpDebug.email == normalize_email(email), EmailOtpDebug.expires_at > now)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def delete_expired(self, now: datetime) -> int:
        result = self.db.execute(
            delete(EmailOtpDebug)
            .where(EmailOtpDebug.expires_at <= now)
        )
        self.db.commit()
        return result.rowcount
