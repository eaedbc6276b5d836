# tests/conftest.py

import os

# Settings are read at import time; provide a complete local environment
# before anything from sponsor_service is imported.
os.environ.setdefault("ENV", "local")
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")
os.environ.setdefault("DATABASE_URL_PROD", "sqlite://")
os.environ.setdefault("KAFKA_BOOTSTRAP_SERVERS_LOCAL", "localhost:9092")
os.environ.setdefault("KAFKA_BOOTSTRAP_SERVERS_PROD", "kafka:29092")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_S3_BUCKET_NAME", "sponsor-assets")
os.environ.setdefault("AWS_S3_REGION", "us-east-1")

import pytest
from starlette.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from unittest.mock import MagicMock

from sponsor_service.main import app
from sponsor_service.api import deps
from sponsor_service.db.session import get_db
from sponsor_service.models import Base
from sponsor_service.schemas.token import TokenPayload
from sponsor_service.core.kafka_producer import get_kafka_producer
from sponsor_service.core.s3 import StorageResult, get_object_storage

TEST_USER_ID = 501


# --- Test Database Setup ---
# One in-memory SQLite database shared by every connection of the test.
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    A fresh schema per test. The sponsor service commits, so tables are
    recreated instead of rolling back an outer transaction.
    """
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def storage():
    """Object storage double that accepts every upload."""
    mock = MagicMock()
    mock.store.side_effect = lambda image, key: StorageResult(
        url=f"https://cdn.test/{key}"
    )
    return mock


@pytest.fixture(scope="function")
def producer():
    return MagicMock()


# --- Mock Dependencies Setup ---
def override_get_current_user():
    return TokenPayload(sub=str(TEST_USER_ID), exp=9999999999)


@pytest.fixture(scope="function")
def test_client(db_session, producer, storage):
    """
    TestClient backed by the test database, with auth, Kafka and S3 mocked.
    """

    def override_get_db():
        yield db_session

    def override_get_kafka_producer():
        yield producer

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_current_user] = override_get_current_user
    app.dependency_overrides[get_kafka_producer] = override_get_kafka_producer
    app.dependency_overrides[get_object_storage] = lambda: storage

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
