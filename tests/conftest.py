"""Test configuration and fixtures"""

from datetime import datetime

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.customer import Customer
from app.models.reservation import Reservation


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_customers(test_db):
    """Create a handful of customers"""
    customers = [
        Customer(first_name="Ann", last_name="Lee", phone="555-1111"),
        Customer(first_name="AnNe", last_name="Marsh", phone="555-1212"),
        Customer(first_name="Joanna", last_name="Smith", notes="Window seat"),
        Customer(first_name="Bob", last_name="Brown"),
        Customer(first_name="Alice", last_name="Brown"),
    ]

    for customer in customers:
        test_db.add(customer)

    await test_db.commit()
    return customers


@pytest.fixture
async def test_reservations(test_db, test_customers):
    """Give customers different numbers of reservations"""
    ann, anne, joanna, bob, _alice = test_customers
    counts = [(ann, 1), (anne, 3), (joanna, 2), (bob, 2)]

    reservations = []
    for customer, count in counts:
        for day in range(count):
            reservation = Reservation(
                customer_id=customer.id,
                num_guests=2,
                start_at=datetime(2024, 1, 1 + day, 18, 0),
            )
            test_db.add(reservation)
            reservations.append(reservation)

    await test_db.commit()
    return reservations


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
