"""
Cleanup tasks for expired verification codes
"""
import logging
from celery import shared_task
from app.core.database import SessionLocal
from app.services.otp import sweep_expired_otps

logger = logging.getLogger(__name__)


@shared_task(name="app.tasks.cleanup.cleanup_expired_otps")
def cleanup_expired_otps():
    """
    Delete expired email OTPs and debug OTPs.
    Failures are logged; the next scheduled run retries.
    """
    db = SessionLocal()
    try:
        result = sweep_expired_otps(db)
        return {"success": True, **result}
    except Exception as e:
        db.rollback()
        logger.error(f"[CLEANUP] Error deleting expired OTPs: {e}")
        return {"success": False, "error": str(e)}
    finally:
        db.close()
