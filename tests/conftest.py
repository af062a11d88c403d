# /tests/conftest.py

import os

# Point the app's default engine at a throwaway in-memory DB before it is imported.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db import base  # noqa: F401  (registers every model)
from app.db.base_class import Base
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Every test starts in demo mode unless it sets a key itself."""
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)


@pytest.fixture
def engine():
    """A fresh, empty in-memory database per test, shared across threads."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_service(session_factory):
    session = session_factory()
    try:
        yield DatabaseService(db_session=session)
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan (which creates tables on the
    # configured engine) is not needed here.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Factory: registers a user and returns (user_json, auth_headers)."""
    def _signup(email: str = "writer@example.com", password: str = "s3cret-pass", display_name: str = "Writer"):
        response = client.post(
            "/api/auth/signup",
            json={"email": email, "password": password, "displayName": display_name},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}
    return _signup


@pytest.fixture
def auth_headers(signup):
    _, headers = signup()
    return headers
