"""
Tests for configuration
"""
import pytest
from app.core.config import settings


def test_settings_loaded():
    """Test that settings are loaded"""
    assert settings.APP_NAME is not None


def test_database_config():
    """Test database configuration exists"""
    assert hasattr(settings, 'DATABASE_URL')
    assert hasattr(settings, 'POSTGRES_HOST')
    assert hasattr(settings, 'POSTGRES_PORT')


def test_otp_defaults():
    """Test OTP defaults"""
    assert settings.OTP_LENGTH == 6
    assert settings.OTP_EXPIRY == 300
    assert settings.OTP_MAX_ATTEMPTS == 3
    assert settings.academic_suffixes == [".edu"]


def test_debug_mode_off_by_default():
    """Test debug mode must be switched on explicitly"""
    assert settings.OTP_DEBUG_MODE == False


def test_email_configured(monkeypatch):
    """Test email_configured needs an API key"""
    monkeypatch.setattr(settings, "SENDGRID_API_KEY", "")
    assert settings.email_configured == False
    monkeypatch.setattr(settings, "SENDGRID_API_KEY", "SG.key")
    assert settings.email_configured == True


def test_celery_beat_schedule():
    """Test the cleanup task is scheduled hourly"""
    from app.core.celery_app import celery_app

    entry = celery_app.conf.beat_schedule['cleanup-expired-otps']
    assert entry['task'] == 'app.tasks.cleanup.cleanup_expired_otps'
    assert entry['schedule'] == 3600.0
