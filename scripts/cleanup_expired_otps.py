#!/usr/bin/env python3
"""
Delete expired email OTPs once, outside the Celery beat schedule
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.database import SessionLocal
from app.core.logging import setup_logging
from app.services.otp import sweep_expired_otps


def main():
    setup_logging()
    db = SessionLocal()
    try:
        result = sweep_expired_otps(db)
        print(f"✅ Deleted {result['otps']} expired OTPs and {result['debug']} debug OTPs")
        return 0
    except Exception as e:
        db.rollback()
        print(f"❌ Cleanup failed: {e}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
