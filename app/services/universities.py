"""
University directory lookups (read-only)
"""
from typing import Optional
from sqlalchemy.orm import Session
from app.models import University


def get_university(db: Session, university_id: str) -> Optional[University]:
    if not university_id:
        return None
    return db.get(University, university_id)
