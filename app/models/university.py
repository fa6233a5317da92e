"""
University Model
"""
from datetime import datetime
from app.utils.datetime_utils import utcnow
from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base


class University(Base):
    __tablename__ = "universities"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    domains: Mapped[list] = mapped_column(JSON, default=list)  # lower-cased, e.g. ["stanford.edu"]
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    def accepts_domain(self, domain: str) -> bool:
        return domain.lower() in {d.lower() for d in (self.domains or [])}

    def __repr__(self):
        return f"<University(id={self.id}, name={self.name})>"
