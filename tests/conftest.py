"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.database import get_db
# Import all models to ensure all tables are created
from app.db.models import (
    Base, User, Property, RentalUnit, Listing, RentalApplication,
    LeaseFinancial, LeaseStatus, Expense, ExpenseCategory,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


# Create a shared test database engine
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Override the dependency globally for all tests
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop after."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Create database session for test setup."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def owner(db_session):
    """Create a property owner."""
    user = User(email="owner@example.com", first_name="Test", last_name="Owner")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_owner(db_session):
    """Create a second, unrelated owner."""
    user = User(email="other@example.com", first_name="Other", last_name="Owner")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def leased_property(db_session, owner):
    """
    A 200 000 EUR property with one unit let all of 2024.

    Rent is 1 000 EUR + 100 EUR charges per month; one 500 EUR tax bill in
    March 2024 and one 400 EUR tax bill in March 2023.
    """
    prop = Property(name="Test Flat", owner_id=owner.id, purchase_price=200000)
    db_session.add(prop)
    db_session.flush()

    unit = RentalUnit(property_id=prop.id, name="Whole flat")
    db_session.add(unit)
    db_session.flush()

    listing = Listing(rental_unit_id=unit.id, title="Flat", price=1100)
    db_session.add(listing)
    db_session.flush()

    application = RentalApplication(listing_id=listing.id, lease_status=LeaseStatus.SIGNED)
    db_session.add(application)
    db_session.flush()

    db_session.add(
        LeaseFinancial(
            application_id=application.id,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
            base_rent_cents=100000,
            service_charges_cents=10000,
        )
    )
    db_session.add(
        Expense(
            property_id=prop.id,
            category=ExpenseCategory.TAX_PROPERTY,
            date_occurred=date(2024, 3, 10),
            amount_total_cents=50000,
            amount_deductible_cents=50000,
        )
    )
    db_session.add(
        Expense(
            property_id=prop.id,
            category=ExpenseCategory.TAX_PROPERTY,
            date_occurred=date(2023, 3, 10),
            amount_total_cents=40000,
            amount_deductible_cents=40000,
        )
    )
    db_session.commit()
    db_session.refresh(prop)
    return prop
