import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from app.main import app
from app.db.session import get_session
from app.core.security import create_access_token, get_password_hash
from app.models import User, UserRole


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(session, email, role=UserRole.USER, name="Test User", password="secret123"):
    user = User(name=name, email=email, password_hash=get_password_hash(password), role=role)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_headers(user):
    return {"x-auth-token": create_access_token(user.id)}


@pytest.fixture
def admin(session):
    return make_user(session, "admin@example.com", role=UserRole.ADMIN, name="Admin")


@pytest.fixture
def user(session):
    return make_user(session, "user@example.com")


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def product(client, admin_headers):
    response = client.post(
        "/api/products",
        json={"name": "Widget", "price": 9.99, "category": "Tools", "stockQuantity": 5},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()
