import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are read at import time; keep tests off the user's data directory
os.environ.setdefault("EDUTRACK_DATABASE_URL", "sqlite://")
os.environ.setdefault("EDUTRACK_LOG_DIR", tempfile.mkdtemp(prefix="edutrack-logs-"))

# Now import after path is set
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401  registers tables
from database import Base, get_db
from domain.entities.student import years_before


@pytest.fixture
def engine():
    """Create in-memory database for testing"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(engine):
    """TestClient whose requests each get a session on the test database."""
    from main import app

    SessionLocal = sessionmaker(bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def student_payload():
    return {
        "fullName": "Jane Marie Doe",
        "dateOfBirth": years_before(date.today(), 20).isoformat(),
        "email": "jane.doe@university.edu",
        "phoneNumber": "(555) 234-5678",
        "address": {
            "street": "123 main st",
            "city": "springfield",
            "state": "il",
            "zipCode": "62701",
            "country": "US",
        },
    }


@pytest.fixture
def course_payload():
    return {
        "title": "Introduction to Programming",
        "description": "Fundamentals of programming using Python.",
        "courseCode": "CS101",
        "credits": 3,
        "maxCapacity": 40,
        "department": "Computer Science",
        "level": "Undergraduate",
    }
