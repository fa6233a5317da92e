"""
Challenge store: atomic single-record operations on email_otps
Every mutation commits on its own so it is visible to concurrent handlers
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models import EmailOtp


class ChallengeStore:
    def __init__(self, db: Session):
        self.db = db

    def get(self, email_hash: str) -> Optional[EmailOtp]:
        """Fresh read, bypassing the session identity map"""
        stmt = (
            select(EmailOtp)
            .where(EmailOtp.email_hash == email_hash)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def put(self, email_hash: str, otp_hash: str, expires_at: datetime, created_at: datetime) -> EmailOtp:
        """Create or overwrite the challenge for email_hash; tries resets to 0"""
        values = {
            "otp_hash": otp_hash,
            "expires_at": expires_at,
            "tries": 0,
            "created_at": created_at,
        }
        result = self.db.execute(
            update(EmailOtp)
            .where(EmailOtp.email_hash == email_hash)
            .values(**values)
        )
        if result.rowcount == 0:
            self.db.add(EmailOtp(email_hash=email_hash, **values))
            try:
                self.db.commit()
            except IntegrityError:
                # Another issuer inserted first; last write wins
                self.db.rollback()
                self.db.execute(
                    update(EmailOtp)
                    .where(EmailOtp.email_hash == email_hash)
                    .values(**values)
                )
                self.db.commit()
        else:
            self.db.commit()
        return self.get(email_hash)

    def increment_tries(self, email_hash: str, otp_hash: str, expected_tries: int) -> bool:
        """
        Compare-and-set: bump tries only if the record still holds the same
        code and the same counter we read. False means it changed underneath us.
        """
        result = self.db.execute(
            update(EmailOtp)
            .where(
                EmailOtp.email_hash == email_hash,
                EmailOtp.otp_hash == otp_hash,
                EmailOtp.tries == expected_tries,
            )
            .values(tries=EmailOtp.tries + 1)
        )
        self.db.commit()
        return result.rowcount == 1

    def delete(self, email_hash: str, otp_hash: Optional[str] = None) -> bool:
        """
        Delete the record; with otp_hash given, only if it still holds that code.
        Returns whether a row was removed.
        """
        stmt = delete(EmailOtp).where(EmailOtp.email_hash == email_hash)
        if otp_hash is not None:
            stmt = stmt.where(EmailOtp.otp_hash == otp_hash)
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount == 1

    def delete_expired(self, now: datetime) -> int:
        result = self.db.execute(
            delete(EmailOtp)
            .where(EmailOtp.expires_at <= now)
        )
        self.db.commit()
        return result.rowcount
