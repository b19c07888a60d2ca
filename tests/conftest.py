"""
Pytest configuration and fixtures for the API tests.

The environment is prepared before any application module is imported so
that settings pick up the in-memory database and the admin allow list.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAILS"] = "admin@ucsb.edu"
os.environ["SECRET_KEY"] = "test-secret"

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from database import Base, get_db
from main import app
from utils.tokenJWT import create_access_token

USER_EMAIL = "user@ucsb.edu"
ADMIN_EMAIL = "admin@ucsb.edu"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_token(email: str, **claims) -> str:
    """Mint a session token the way the login callback does."""
    return create_access_token({"sub": email, "email": email, **claims})


def bearer(email: str, **claims) -> dict:
    return {"Authorization": f"Bearer {make_token(email, **claims)}"}


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client whose requests share the test session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers() -> dict:
    return bearer(USER_EMAIL, name="Regular User")


@pytest.fixture
def admin_headers() -> dict:
    return bearer(ADMIN_EMAIL, name="Admin User")
