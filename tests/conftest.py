"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rentbook.api.deps import get_db
from rentbook.core.database import init_db
from rentbook.crud import house as house_crud
from rentbook.crud import tenant as tenant_crud
from rentbook.main import app
from rentbook.schemas.house import HouseCreate
from rentbook.schemas.tenant import TenantWithRoomCreate


def first_of_month(months_back: int, today: date) -> date:
    """First day of the month `months_back` months before `today`'s month."""
    year, month = today.year, today.month - months_back
    while month <= 0:
        month += 12
        year -= 1
    return date(year, month, 1)


@pytest.fixture
def today() -> date:
    """Fixed 'now' for status computations."""
    return date(2026, 3, 15)


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def client(db: Session) -> TestClient:
    """TestClient whose requests all use the test session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def statements(engine) -> list:
    """SQL statements sent to the store while the test runs."""
    seen = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", before_cursor_execute)
    yield seen
    event.remove(engine, "before_cursor_execute", before_cursor_execute)


@pytest.fixture
def make_house(db: Session) -> Callable[..., int]:
    def _make(name: str = "Villa A", address: str = "12 rue des Jardins, Cocody") -> int:
        return house_crud.create(db, HouseCreate(name=name, address=address))

    return _make


@pytest.fixture
def make_tenant(db: Session) -> Callable[..., int]:
    """Create a tenant together with their room; returns the tenant id."""

    def _make(
        house_id: int,
        entry_date: date,
        first_name: str = "Jean",
        last_name: str = "Dupont",
        rent_amount: Decimal = Decimal("50000"),
        room_name: str = "101",
        room_type: str = "Studio",
        **extra,
    ) -> int:
        payload = TenantWithRoomCreate(
            house_id=house_id,
            room_name=room_name,
            room_type=room_type,
            first_name=first_name,
            last_name=last_name,
            phone=extra.pop("phone", "+225 07 12 34 56"),
            entry_date=entry_date,
            rent_amount=rent_amount,
            **extra,
        )
        tenant_id, _ = tenant_crud.create_with_room(db, payload)
        return tenant_id

    return _make
