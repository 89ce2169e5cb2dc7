"""
Input records for the analytics engine.

These are plain snapshots of stored rows, fetched once per report by the
data source and never mutated by the engine.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from app.analytics.money import Cents, MajorUnits


@dataclass(frozen=True)
class PropertyRecord:
    """A property in scope with its acquisition value."""

    id: str
    acquisition_value: Optional[MajorUnits] = None


@dataclass(frozen=True)
class LeasePeriodRecord:
    """A window of constant rent terms within a signed lease."""

    application_id: str
    property_id: str
    start_date: date
    end_date: Optional[date]  # None = open-ended
    base_rent_cents: Cents
    service_charges_cents: Cents

    def overlaps_year(self, year: int) -> bool:
        """True if any part of the period falls in the calendar year."""
        if self.start_date > date(year, 12, 31):
            return False
        if self.end_date is not None and self.end_date < date(year, 1, 1):
            return False
        return True

    def covers(self, day: date) -> bool:
        """True if the period is in force on the given day (inclusive)."""
        if day < self.start_date:
            return False
        if self.end_date is not None and day > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class ExpenseRecord:
    """A dated, categorized outflow tied to a property."""

    property_id: str
    category: str
    date_occurred: date
    amount_total_cents: Cents
    amount_deductible_cents: Cents = Cents(0)
    amount_recoverable_cents: Cents = Cents(0)
    is_recoverable: bool = False


@dataclass(frozen=True)
class ListingRecord:
    """The current asking price of a rental unit."""

    rental_unit_id: str
    property_id: str
    monthly_price: MajorUnits


@dataclass
class AnalyticsSnapshot:
    """
    Everything the engine needs for one report.

    Expenses should cover both the target year and the prior year so that
    the year-over-year pass runs on the same snapshot.
    """

    properties: List[PropertyRecord] = field(default_factory=list)
    lease_periods: List[LeasePeriodRecord] = field(default_factory=list)
    expenses: List[ExpenseRecord] = field(default_factory=list)
    listings: List[ListingRecord] = field(default_factory=list)
