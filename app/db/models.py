"""
SQLAlchemy ORM models for the rental portfolio.
"""

from datetime import datetime
from sqlalchemy import (
    Column,
    String,
    Integer,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Enum as SQLEnum,
)
from sqlalchemy.orm import declarative_base, relationship
import uuid
import enum


class LeaseStatus(str, enum.Enum):
    """Lease negotiation status of a rental application."""
    PENDING = "PENDING"
    SIGNED = "SIGNED"
    TERMINATED = "TERMINATED"


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    COLD_WATER = "COLD_WATER"
    HOT_WATER = "HOT_WATER"
    ELECTRICITY_COMMON = "ELECTRICITY_COMMON"
    ELECTRICITY_PRIVATE = "ELECTRICITY_PRIVATE"
    HEATING_COLLECTIVE = "HEATING_COLLECTIVE"
    TAX_PROPERTY = "TAX_PROPERTY"
    ELEVATOR = "ELEVATOR"
    INSURANCE = "INSURANCE"
    MAINTENANCE = "MAINTENANCE"
    CARETAKER = "CARETAKER"
    OTHER = "OTHER"
    METERS = "METERS"
    GENERAL_CHARGES = "GENERAL_CHARGES"
    BUILDING_CHARGES = "BUILDING_CHARGES"
    PARKING = "PARKING"
    INSURANCE_GLI = "INSURANCE_GLI"


Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Mixin for audit fields on all models."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    created_by = Column(String(255), nullable=True)
    updated_by = Column(String(255), nullable=True)
    is_deleted = Column(Boolean, default=False, nullable=False)


class User(AuditMixin, Base):
    """Property owner."""

    __tablename__ = "users"

    id = Column(String, primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    # Relationships
    properties = relationship(
        "Property",
        back_populates="owner",
        foreign_keys="Property.owner_id",
        lazy="dynamic",
    )


class Property(AuditMixin, Base):
    """A physical real estate asset."""

    __tablename__ = "properties"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)

    # Owner (for access control)
    owner_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    # Address
    address_street = Column(String(255))
    address_city = Column(String(100))
    address_zip = Column(String(20))

    # Purchase info, in whole euros
    purchase_price = Column(Integer, nullable=True)

    # Relationships
    owner = relationship("User", back_populates="properties", foreign_keys=[owner_id])
    rental_units = relationship(
        "RentalUnit",
        back_populates="property",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )
    expenses = relationship(
        "Expense",
        back_populates="property",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )


class RentalUnit(AuditMixin, Base):
    """A leasable part of a property: the whole unit or a single room."""

    __tablename__ = "rental_units"

    id = Column(String, primary_key=True, default=generate_uuid)
    property_id = Column(String, ForeignKey("properties.id"), nullable=False, index=True)
    name = Column(String(255))
    is_room = Column(Boolean, default=False)

    # Relationships
    property = relationship("Property", back_populates="rental_units")
    listings = relationship(
        "Listing",
        back_populates="rental_unit",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )


class Listing(AuditMixin, Base):
    """Advertisement for a rental unit."""

    __tablename__ = "listings"

    id = Column(String, primary_key=True, default=generate_uuid)
    rental_unit_id = Column(
        String, ForeignKey("rental_units.id"), nullable=False, index=True
    )
    title = Column(String(255))

    # Monthly asking rent, in whole euros
    price = Column(Integer, nullable=False)

    # Relationships
    rental_unit = relationship("RentalUnit", back_populates="listings")
    applications = relationship(
        "RentalApplication",
        back_populates="listing",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )


class RentalApplication(AuditMixin, Base):
    """Tenancy negotiation for a listing."""

    __tablename__ = "rental_applications"

    id = Column(String, primary_key=True, default=generate_uuid)
    listing_id = Column(String, ForeignKey("listings.id"), nullable=False, index=True)
    lease_status = Column(SQLEnum(LeaseStatus), default=LeaseStatus.PENDING, nullable=False)

    # Relationships
    listing = relationship("Listing", back_populates="applications")
    financials = relationship(
        "LeaseFinancial",
        back_populates="application",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )


class LeaseFinancial(AuditMixin, Base):
    """Rent terms in force over [start_date, end_date]; open-ended if no end."""

    __tablename__ = "lease_financials"

    id = Column(String, primary_key=True, default=generate_uuid)
    application_id = Column(
        String, ForeignKey("rental_applications.id"), nullable=False, index=True
    )
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)

    # Monthly amounts in cents
    base_rent_cents = Column(Integer, nullable=False, default=0)
    service_charges_cents = Column(Integer, nullable=False, default=0)

    # Relationships
    application = relationship("RentalApplication", back_populates="financials")


class Expense(AuditMixin, Base):
    """Owner-side outflow tied to a property."""

    __tablename__ = "expenses"

    id = Column(String, primary_key=True, default=generate_uuid)
    property_id = Column(String, ForeignKey("properties.id"), nullable=False, index=True)
    category = Column(SQLEnum(ExpenseCategory), nullable=False)
    label = Column(String(255))
    date_occurred = Column(Date, nullable=False, index=True)

    # Amounts in cents
    amount_total_cents = Column(Integer, nullable=False)
    amount_deductible_cents = Column(Integer, nullable=False, default=0)
    amount_recoverable_cents = Column(Integer, nullable=False, default=0)
    is_recoverable = Column(Boolean, default=False, nullable=False)

    # Relationships
    property = relationship("Property", back_populates="expenses")
