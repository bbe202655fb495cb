import os
import sys
from pathlib import Path

# Keep the test run away from the real data dir before any app module is imported
os.environ.setdefault("USERS_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("USERS_API_LOG_TO_FILE", "false")

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from unittest.mock import create_autospec
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from dependencies import get_user_service
from main import app
from models import User
from repositories.user_repository import UserRepository
from services.interfaces import IUserService
from services.user_service import UserService


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine('sqlite:///:memory:')
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def user_repository(db_session):
    return UserRepository(db_session)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def stored_user(user_repository):
    """A user already present in the database"""
    return user_repository.add(User("Maija", "Virtanen", "maija@example.com"))


@pytest.fixture
def client():
    """
    TestClient wired to a fresh in-memory database.

    StaticPool keeps a single connection so the threadpool used for sync
    endpoints sees the same database.
    """
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def mock_service():
    return create_autospec(IUserService, instance=True)


@pytest.fixture
def mocked_client(mock_service):
    """TestClient whose endpoints talk to a mocked IUserService"""
    app.dependency_overrides[get_user_service] = lambda: mock_service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
