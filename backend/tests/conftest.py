"""Pytest fixtures — per-test SQLite database for fast, isolated tests."""
import os

# The application's own engine must never reach for PostgreSQL under test
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from campus_events.database import Base, build_engine, get_db
from campus_events.main import app

# Import all models so they register with Base.metadata
import campus_events.models  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine (WAL, foreign keys on) for each test."""
    engine = build_engine(SQLITE_URL)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers: create entities via the API, return the JSON response dict
# ---------------------------------------------------------------------------
def create_test_event(client: TestClient, title: str = "Welcome Orientation", capacity: int = 100,
                      date: str = "2030-09-01T10:00:00Z", category: str = "Academic",
                      venue: str = "Main Auditorium", description: str = "") -> dict:
    """Helper — POST /api/events and return response JSON."""
    resp = client.post("/api/events/", json={
        "title": title,
        "description": description,
        "venue": venue,
        "date": date,
        "max_capacity": capacity,
        "category": category,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_student(client: TestClient, name: str = "Test Student", email: str = "student@u.edu",
                        department: str = "Physics", student_identifier: str = "S0001") -> dict:
    """Helper — POST /api/students and return response JSON."""
    resp = client.post("/api/students/", json={
        "full_name": name,
        "email": email,
        "department": department,
        "student_identifier": student_identifier,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def register(client: TestClient, event_id: int, student_id: int):
    """Helper — POST /api/registrations and return the raw response."""
    return client.post("/api/registrations/", json={"event_id": event_id, "student_id": student_id})


def submit_feedback(client: TestClient, event_id: int, student_id: int, rating: int = 5, **ratings):
    """Helper — POST /api/feedback and return the raw response."""
    return client.post("/api/feedback/", json={
        "event_id": event_id,
        "student_id": student_id,
        "rating": rating,
        **ratings,
    })
