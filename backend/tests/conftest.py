"""Shared fixtures: temporary SQLite database, test client and auth headers"""
import base64
import json
import os
import tempfile
import uuid

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="farmhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'farmhub.db')}"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from farmhub.core.database import Base, SessionLocal, engine  # noqa: E402
from farmhub.main import app  # noqa: E402


def _b64(data: dict) -> str:
    raw = json.dumps(data).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def make_token(user_id) -> str:
    """Unsigned JWT carrying only the `sub` claim"""
    return f"{_b64({'alg': 'none', 'typ': 'JWT'})}.{_b64({'sub': str(user_id)})}.signature"


def auth_for(user_id) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture(autouse=True)
def _database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def auth_headers(user_id):
    return auth_for(user_id)


@pytest.fixture
def other_headers():
    return auth_for(uuid.uuid4())
