"""
Shared fixtures: an in-memory SQLite database, a TestClient wired to it,
and a handful of users and tours to book against.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tourpro.database import Base, get_db
from tourpro.main import app
from tourpro.models import User, Tour
from tourpro.enums import UserRole, TourStatus
from tourpro.auth.utils import get_password_hash, create_access_token

PASSWORD = "secret123"
# bcrypt is slow; hash once for every fixture user
PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine shared by every session in a test."""
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
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _make_user(session, name, email, role=UserRole.USER):
    user = User(
        name=name,
        email=email,
        password=PASSWORD_HASH,
        phone="+1-555-0000",
        role=role.value,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def admin(session):
    return _make_user(session, "Admin User", "admin@tourpro.com", UserRole.ADMIN)


@pytest.fixture
def customer(session):
    return _make_user(session, "John Doe", "john@example.com")


@pytest.fixture
def other_customer(session):
    return _make_user(session, "Jane Smith", "jane@example.com")


def auth_headers(user):
    token = create_access_token({"sub": str(user.id), "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def customer_headers(customer):
    return auth_headers(customer)


@pytest.fixture
def other_headers(other_customer):
    return auth_headers(other_customer)


@pytest.fixture
def make_tour(session, admin):
    """Factory for tours priced at 1000 per adult and 500 per child."""
    def _make_tour(title="Amazing Bali Getaway", status=TourStatus.ACTIVE, **overrides):
        values = dict(
            title=title,
            description="Temples, rice terraces and beaches.",
            destination="Bali",
            country="Indonesia",
            duration_days=7,
            duration_nights=6,
            price_adult=Decimal("1000"),
            price_child=Decimal("500"),
            max_group_size=15,
            category="Beach",
            available_slots=12,
            status=status.value,
            created_by=admin.id,
        )
        values.update(overrides)
        tour = Tour(**values)
        session.add(tour)
        session.commit()
        session.refresh(tour)
        return tour

    return _make_tour


@pytest.fixture
def tour(make_tour):
    return make_tour()
