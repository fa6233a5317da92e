"""
Shared test fixtures
"""
import os

# Must be set before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SENDGRID_API_KEY"] = ""
os.environ["OTP_DEBUG_MODE"] = "false"
os.environ["LOG_FILE"] = ""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from app import models  # noqa: F401
from app.core.database import Base, SessionLocal, engine
from app.main import app
from app.models import University


class FakeClock:
    """Callable clock that tests can move forward"""

    def __init__(self, start: datetime = datetime(2025, 1, 15, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


class FakeSender:
    """Email transport that records messages"""

    def __init__(self, delivered: bool = True):
        self.delivered = delivered
        self.sent = []

    def __call__(self, to, subject, text, html) -> bool:
        self.sent.append({"to": to, "subject": subject, "text": text, "html": html})
        return self.delivered


class MemoryDebugSink:
    def __init__(self):
        self.codes = {}

    def store(self, email, code, university_id, expires_at):
        self.codes[email] = code

    def discard(self, email):
        self.codes.pop(email.strip().lower(), None)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def universities(db):
    db.add_all([
        University(id="stanford", name="Stanford University", domains=["stanford.edu"]),
        University(id="mit", name="Massachusetts Institute of Technology", domains=["mit.edu", "alum.mit.edu"]),
    ])
    db.commit()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def client(db, universities):
    return TestClient(app)
