"""
Shared fixtures.

Every test gets its own in-memory SQLite database, so tests never touch the
DATABASE_URL configured for development.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.models.transaction import Transaction  # noqa: F401
from app.services.transactions import create_transaction


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_tx(session):
    """Create a transaction through the service with sensible defaults."""

    def _add(**overrides):
        fields = {
            "date": "2024-03-15",
            "type": "expense",
            "category": "mercado",
            "budget": "100",
            "amount": "80",
        }
        fields.update(overrides)
        return create_transaction(session, fields)

    return _add
