"""
Tests for expired OTP cleanup
"""
from datetime import datetime, timedelta
from app.core.security import email_fingerprint, hash_otp
from app.models import EmailOtp, EmailOtpDebug
from app.services.challenge_store import ChallengeStore
from app.services.otp import sweep_expired_otps
from app.tasks.cleanup import cleanup_expired_otps
from app.utils.datetime_utils import utcnow

NOW = datetime(2025, 1, 15, 12, 0, 0)


def add_otps(db, count, expires_at, prefix):
    for i in range(count):
        db.add(EmailOtp(
            email_hash=email_fingerprint(f"{prefix}{i}@stanford.edu"),
            otp_hash=hash_otp("123456"),
            expires_at=expires_at,
            tries=0,
            created_at=expires_at - timedelta(minutes=5),
        ))
    db.commit()


def test_sweep_deletes_only_expired(db):
    """Test N expired records are deleted and M live records kept"""
    add_otps(db, 3, NOW - timedelta(minutes=1), "old")
    add_otps(db, 2, NOW + timedelta(minutes=1), "new")

    result = sweep_expired_otps(db, now=lambda: NOW)

    assert result["otps"] == 3
    assert result["deleted_count"] == 3
    assert db.query(EmailOtp).count() == 2
    assert all(r.expires_at > NOW for r in db.query(EmailOtp).all())


def test_sweep_is_idempotent(db):
    """Test a second sweep removes nothing"""
    add_otps(db, 3, NOW - timedelta(minutes=1), "old")
    add_otps(db, 2, NOW + timedelta(minutes=1), "new")

    sweep_expired_otps(db, now=lambda: NOW)
    result = sweep_expired_otps(db, now=lambda: NOW)

    assert result["deleted_count"] == 0
    assert db.query(EmailOtp).count() == 2


def test_sweep_includes_debug_records(db):
    """Test expired debug records are swept too"""
    db.add_all([
        EmailOtpDebug(email="old@stanford.edu", otp="123456", university_id="stanford",
                      expires_at=NOW - timedelta(seconds=1)),
        EmailOtpDebug(email="new@stanford.edu", otp="654321", university_id="stanford",
                      expires_at=NOW + timedelta(minutes=4)),
    ])
    db.commit()
    add_otps(db, 1, NOW - timedelta(minutes=1), "old")

    result = sweep_expired_otps(db, now=lambda: NOW)

    assert result == {"deleted_count": 2, "otps": 1, "debug": 1}
    assert [r.email for r in db.query(EmailOtpDebug).all()] == ["new@stanford.edu"]


def test_sweep_empty_store(db):
    """Test sweeping nothing"""
    assert sweep_expired_otps(db, now=lambda: NOW)["deleted_count"] == 0


def test_cleanup_task(db):
    """Test the Celery task sweeps with the current time"""
    add_otps(db, 2, utcnow() - timedelta(hours=1), "old")
    add_otps(db, 1, utcnow() + timedelta(hours=1), "new")

    result = cleanup_expired_otps()

    assert result["success"] == True
    assert result["otps"] == 2
    db.expire_all()
    assert db.query(EmailOtp).count() == 1


def test_cleanup_task_reports_failure(db, monkeypatch):
    """Test the task never raises"""
    def boom(*args, **kwargs):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr("app.tasks.cleanup.sweep_expired_otps", boom)
    result = cleanup_expired_otps()

    assert result == {"success": False, "error": "database unavailable"}


def test_sweep_after_record_consumed(db):
    """Test a record removed before the sweep runs is simply not counted"""
    add_otps(db, 3, NOW - timedelta(minutes=1), "old")
    ChallengeStore(db).delete(email_fingerprint("old0@stanford.edu"))

    result = sweep_expired_otps(db, now=lambda: NOW)

    assert result["otps"] == 2
    assert db.query(EmailOtp).count() == 0


def test_sweep_uses_injected_clock(db):
    """Test the clock decides what is expired"""
    add_otps(db, 2, NOW + timedelta(minutes=1), "live")

    assert sweep_expired_otps(db, now=lambda: NOW)["otps"] == 0
    assert sweep_expired_otps(db, now=lambda: NOW + timedelta(minutes=2))["otps"] == 2
