"""
Analytics data source backed by SQLAlchemy.

Reads the rows the analytics engine needs and hands them over as plain
records. All reads for a report happen here, once, before computation.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.analytics.money import Cents, MajorUnits
from app.analytics.records import (
    AnalyticsSnapshot,
    ExpenseRecord,
    LeasePeriodRecord,
    ListingRecord,
    PropertyRecord,
)
from app.db.models import (
    Expense,
    LeaseFinancial,
    LeaseStatus,
    Listing,
    Property,
    RentalApplication,
    RentalUnit,
)

logger = logging.getLogger(__name__)


class AuthorizationError(Exception):
    """The requesting user may not see the requested property."""


class AnalyticsDataSource:
    """Fetches portfolio records for analytics from the database."""

    def __init__(self, db: Session):
        self.db = db

    def resolve_properties(
        self, user_id: str, property_id: Optional[str] = None
    ) -> List[PropertyRecord]:
        """
        Properties in scope: the given one, or every property the user owns.

        Raises:
            AuthorizationError: If property_id is given but is not a live
                property owned by user_id
        """
        if property_id:
            prop = (
                self.db.query(Property)
                .filter(Property.id == property_id, Property.is_deleted == False)
                .first()
            )
            if not prop or prop.owner_id != user_id:
                raise AuthorizationError(
                    f"User {user_id} cannot access property {property_id}"
                )
            properties = [prop]
        else:
            properties = (
                self.db.query(Property)
                .filter(Property.owner_id == user_id, Property.is_deleted == False)
                .order_by(Property.id)
                .all()
            )

        return [
            PropertyRecord(
                id=p.id,
                acquisition_value=(
                    MajorUnits(p.purchase_price) if p.purchase_price is not None else None
                ),
            )
            for p in properties
        ]

    def fetch_signed_lease_periods(
        self, property_ids: Iterable[str]
    ) -> List[LeasePeriodRecord]:
        """Financial periods of signed applications on the given properties."""
        ids = list(property_ids)
        if not ids:
            return []

        rows = (
            self.db.query(LeaseFinancial, RentalUnit.property_id)
            .join(RentalApplication, LeaseFinancial.application_id == RentalApplication.id)
            .join(Listing, RentalApplication.listing_id == Listing.id)
            .join(RentalUnit, Listing.rental_unit_id == RentalUnit.id)
            .filter(
                RentalUnit.property_id.in_(ids),
                RentalApplication.lease_status == LeaseStatus.SIGNED,
                RentalUnit.is_deleted == False,
                Listing.is_deleted == False,
                RentalApplication.is_deleted == False,
                LeaseFinancial.is_deleted == False,
            )
            .order_by(LeaseFinancial.application_id, LeaseFinancial.start_date)
            .all()
        )

        return [
            LeasePeriodRecord(
                application_id=fin.application_id,
                property_id=prop_id,
                start_date=fin.start_date,
                end_date=fin.end_date,
                base_rent_cents=Cents(fin.base_rent_cents or 0),
                service_charges_cents=Cents(fin.service_charges_cents or 0),
            )
            for fin, prop_id in rows
        ]

    def fetch_expenses(
        self, property_ids: Iterable[str], start: date, end: date
    ) -> List[ExpenseRecord]:
        """Expenses on the given properties dated within [start, end]."""
        ids = list(property_ids)
        if not ids:
            return []

        expenses = (
            self.db.query(Expense)
            .filter(
                Expense.property_id.in_(ids),
                Expense.date_occurred >= start,
                Expense.date_occurred <= end,
                Expense.is_deleted == False,
            )
            .order_by(Expense.date_occurred, Expense.id)
            .all()
        )

        return [
            ExpenseRecord(
                property_id=e.property_id,
                category=e.category.value,
                date_occurred=e.date_occurred,
                amount_total_cents=Cents(e.amount_total_cents),
                amount_deductible_cents=Cents(e.amount_deductible_cents or 0),
                amount_recoverable_cents=Cents(e.amount_recoverable_cents or 0),
                is_recoverable=bool(e.is_recoverable),
            )
            for e in expenses
        ]

    def fetch_active_listings_per_unit(
        self, property_ids: Iterable[str]
    ) -> List[ListingRecord]:
        """The most recently created listing of each rental unit."""
        ids = list(property_ids)
        if not ids:
            return []

        rows = (
            self.db.query(Listing, RentalUnit.property_id)
            .join(RentalUnit, Listing.rental_unit_id == RentalUnit.id)
            .filter(
                RentalUnit.property_id.in_(ids),
                RentalUnit.is_deleted == False,
                Listing.is_deleted == False,
            )
            .order_by(Listing.rental_unit_id, Listing.created_at.desc(), Listing.id)
            .all()
        )

        listings = []
        seen_units = set()
        for listing, prop_id in rows:
            if listing.rental_unit_id in seen_units:
                continue
            seen_units.add(listing.rental_unit_id)
            listings.append(
                ListingRecord(
                    rental_unit_id=listing.rental_unit_id,
                    property_id=prop_id,
                    monthly_price=MajorUnits(listing.price),
                )
            )
        return listings

    def load_snapshot(
        self, user_id: str, year: int, property_id: Optional[str] = None
    ) -> AnalyticsSnapshot:
        """
        Fetch everything needed for a year's report in one go.

        Expenses cover the prior year as well, so the year-over-year
        comparison does not query again.
        """
        properties = self.resolve_properties(user_id, property_id)
        ids = [p.id for p in properties]

        snapshot = AnalyticsSnapshot(
            properties=properties,
            lease_periods=self.fetch_signed_lease_periods(ids),
            expenses=self.fetch_expenses(
                ids, date(year - 1, 1, 1), date(year, 12, 31)
            ),
            listings=self.fetch_active_listings_per_unit(ids),
        )
        logger.debug(
            f"Loaded snapshot for user {user_id}: {len(ids)} properties, "
            f"{len(snapshot.lease_periods)} lease periods, "
            f"{len(snapshot.expenses)} expenses, {len(snapshot.listings)} listings"
        )
        return snapshot
