"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_api.database import Base, get_db
from product_api.main import app


@pytest.fixture
def test_db():
    """Create a test database for testing."""
    # Use in-memory SQLite shared by every session of the test
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        try:
            db = TestingSessionLocal()
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestingSessionLocal

    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_db):
    """Test client bound to the test database."""
    return TestClient(app)


@pytest.fixture
def db_session(test_db):
    """A session on the test database for service level tests."""
    db = test_db()
    try:
        yield db
    finally:
        db.close()
