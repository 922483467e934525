"""
Pytest configuration and fixtures
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "local"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine

from masterdata.main import app
from masterdata.db.base import Base
from masterdata.core.deps import get_db
from masterdata.models import Employee  # noqa: F401  registers every table


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_employee(db):
    """Insert an employee directly; created_date is spaced one minute apart per call"""
    base = datetime(2024, 1, 1, 8, 0, 0)
    counter = {"n": 0}

    def _make(**overrides):
        n = counter["n"]
        counter["n"] += 1
        values = {
            "first_name_en": f"First{n:02d}",
            "last_name_en": f"Last{n:02d}",
            "company_email": f"employee{n:02d}@example.com",
            "created_date": base + timedelta(minutes=n),
        }
        values.update(overrides)
        employee = Employee(**values)
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make
