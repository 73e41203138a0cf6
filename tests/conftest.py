import os

# Point the app at an in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_storage_service
from app.database import Base, SessionLocal, engine
from helpers import FakeStorage
from main import app


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage():
    fake = FakeStorage()
    app.dependency_overrides[get_storage_service] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_storage_service, None)


@pytest.fixture
def make_client(storage):
    """Each client keeps its own cookie jar, so each one is a separate signed-in user"""
    def factory() -> TestClient:
        return TestClient(app)
    return factory


@pytest.fixture
def client(make_client):
    return make_client()
