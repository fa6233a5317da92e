"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
from typing import Optional
import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "BarterBrAIn")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0")

    # ==================== Database ====================
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: int = int(os.getenv("POSTGRES_PORT", "5432"))
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "barterbrain")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "barterbrain")

    # ==================== OTP ====================
    OTP_LENGTH: int = int(os.getenv("OTP_LENGTH", "6"))
    OTP_EXPIRY: int = int(os.getenv("OTP_EXPIRY", "300"))  # 5 minutes
    OTP_MAX_ATTEMPTS: int = int(os.getenv("OTP_MAX_ATTEMPTS", "3"))
    OTP_ACADEMIC_SUFFIXES: str = os.getenv("OTP_ACADEMIC_SUFFIXES", ".edu")
    OTP_DEBUG_MODE: bool = _env_bool("OTP_DEBUG_MODE", "false")
    OTP_CLEANUP_INTERVAL_MINUTES: int = int(os.getenv("OTP_CLEANUP_INTERVAL_MINUTES", "60"))

    # ==================== Email ====================
    EMAIL_PROVIDER: str = os.getenv("EMAIL_PROVIDER", "sendgrid")
    SENDGRID_API_KEY: str = os.getenv("SENDGRID_API_KEY", "")
    SENDGRID_API_URL: str = os.getenv("SENDGRID_API_URL", "https://api.sendgrid.com/v3/mail/send")
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "noreply@barterbrain.com")
    EMAIL_FROM_NAME: str = os.getenv("EMAIL_FROM_NAME", "BarterBrAIn")
    EMAIL_TIMEOUT: int = int(os.getenv("EMAIL_TIMEOUT", "15"))

    # ==================== Celery ====================
    CELERY_BROKER_URL: str = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
    CELERY_RESULT_BACKEND: str = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/0")
    CELERY_TIMEZONE: str = os.getenv("CELERY_TIMEZONE", "UTC")

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/app.log")
    LOG_MAX_SIZE: int = int(os.getenv("LOG_MAX_SIZE", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # ==================== CORS ====================
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    CORS_ALLOW_CREDENTIALS: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"

    # ==================== Features ====================
    FEATURE_OTP_ENABLED: bool = _env_bool("FEATURE_OTP_ENABLED", "true")

    @property
    def email_configured(self) -> bool:
        """True when the email provider has credentials and a sender"""
        return bool(self.SENDGRID_API_KEY and self.EMAIL_FROM)

    @property
    def academic_suffixes(self) -> list[str]:
        return [s.strip().lower() for s in self.OTP_ACADEMIC_SUFFIXES.split(",") if s.strip()]


settings = Settings()
