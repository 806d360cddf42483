"""
Shared fixtures: an in-memory database wired into the FastAPI app.
"""
from datetime import datetime, timezone
from decimal import Decimal
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.core.session import UserSession
from app.db.session import get_db, init_db
from app.models.user import User
from app.models.expense import Expense


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
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
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Insert a user; defaults describe a Google account."""
    counter = {"n": 0}

    def _make_user(**fields):
        counter["n"] += 1
        n = counter["n"]
        values = {
            "email": f"user{n}@example.com",
            "name": f"User {n}",
            "is_verified": True,
            "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "provider": "google",
            "google_id": f"google-{n}",
        }
        values.update(fields)
        user = User(**values)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_expense(db):
    """Insert an expense directly, bypassing ingestion so legacy rows can be built."""
    def _make_expense(user_id=None, amount="10.00", category="Other",
                      description="", date="2024-05-01", created_at=None):
        expense = Expense(
            user_id=user_id,
            amount=Decimal(amount),
            category=category,
            description=description,
            date=date,
            created_at=created_at,
        )
        db.add(expense)
        db.commit()
        db.refresh(expense)
        return expense

    return _make_expense


@pytest.fixture
def user(make_user):
    return make_user(email="alice@example.com", name="Alice", google_id="google-alice")


@pytest.fixture
def auth_client(client, user):
    """Client carrying a session token for `user`."""
    client.headers["Authorization"] = f"Bearer {UserSession.from_user(user).to_token()}"
    return client
