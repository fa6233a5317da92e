"""
Email OTP Models
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import Integer, String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class EmailOtp(Base):
    """Outstanding verification challenge, one per email fingerprint"""
    __tablename__ = "email_otps"

    email_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    otp_hash: Mapped[str] = mapped_column(String(64))
    expires_at: Mapped[datetime] = mapped_column(DateTime, index=True)
    tries: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<EmailOtp(email_hash={self.email_hash[:12]}, tries={self.tries}, expires_at={self.expires_at})>"


class EmailOtpDebug(Base):
    """Plaintext code kept only while debug mode is on and delivery was not confirmed"""
    __tablename__ = "email_otps_debug"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    otp: Mapped[str] = mapped_column(String(10))
    university_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
