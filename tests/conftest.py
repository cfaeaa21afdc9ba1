"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from hotel_search.config import Settings
from hotel_search.db.schema import cities, hotels, metadata
from hotel_search.main import create_app

CITY_ROWS = [
    {"id": 1, "name": "Paris"},
    {"id": 2, "name": "Lyon"},
]

HOTEL_ROWS = [
    {"id": 1, "name": "Grand", "city": 1, "capacity": 50, "price": Decimal("120.00")},
    {"id": 2, "name": "Inn", "city": None, "capacity": 10, "price": Decimal("40.00")},
]


def make_engine():
    # in-memory SQLite shared by every connection in the pool
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def empty_engine():
    """Engine with the two tables created but no rows."""
    engine = make_engine()
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def engine(empty_engine):
    """Engine seeded with two cities and two hotels (one without a city)."""
    with empty_engine.begin() as conn:
        conn.execute(cities.insert(), CITY_ROWS)
        conn.execute(hotels.insert(), HOTEL_ROWS)
    return empty_engine


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", _env_file=None)


@pytest.fixture
def client(engine, settings):
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as c:
        yield c
