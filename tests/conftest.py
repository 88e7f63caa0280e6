import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.auth.utils import create_access_token
from app.api.friends import models as friends_models  # noqa: F401
from app.api.friends.repository import FriendRepository
from app.api.users.models import User
from app.database.database import Base, get_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def repository(db_session):
    return FriendRepository(db_session)


@pytest.fixture
def make_user(db_session):
    """Factory that persists a user and returns it"""
    def _make_user(username, display_name=None, status="offline", is_active=True):
        user = User(
            username=username,
            display_name=display_name or username.capitalize(),
            status=status,
            is_active=is_active,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _auth_headers(user):
        token = create_access_token({"sub": user.username})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
