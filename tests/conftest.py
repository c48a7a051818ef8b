"""
Shared fixtures for API tests

- In-memory SQLite database, rebuilt for every test
- TestClient bound to that database through dependency overrides
- ``acting_as`` to bind a principal without going through token auth
"""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from songs_api.api.dependencies import require_current_user
from songs_api.db.base import Base
from songs_api.db.models.user import User
from songs_api.db.session import get_db
from songs_api.main import app

from factories import make_user


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose requests share the test's database session."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def acting_as(client: TestClient) -> Callable[[User], None]:
    """Bind the given user as the request principal for subsequent calls."""

    def _acting_as(user: User) -> None:
        app.dependency_overrides[require_current_user] = lambda: user

    return _acting_as


@pytest.fixture
def user(db_session: Session) -> User:
    return make_user(db_session)


@pytest.fixture
def auth_client(client: TestClient, user: User, acting_as) -> TestClient:
    """Client authenticated as ``user``."""
    acting_as(user)
    return client
