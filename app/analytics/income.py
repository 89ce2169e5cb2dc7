"""
Lease Income Aggregation

Builds the monthly rent series for a calendar year from signed lease
financial periods.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

import numpy as np
from dateutil.relativedelta import relativedelta

from app.analytics.money import Cents
from app.analytics.records import LeasePeriodRecord
from app.analytics.scope import Scope

# A month counts as covered when the period is in force on this day
SAMPLE_DAY = 15


@dataclass(frozen=True)
class LeaseIncome:
    """Income totals for one calendar year, in cents."""

    monthly_income: List[Cents]  # rent + charges, Jan..Dec
    annual_base_rent_cents: Cents  # base rent only, used for yield

    @property
    def total_income_cents(self) -> Cents:
        return Cents(sum(self.monthly_income))


def month_sample_dates(year: int) -> List[date]:
    """The representative day of each month of the year."""
    first = date(year, 1, SAMPLE_DAY)
    return [first + relativedelta(months=m) for m in range(12)]


def aggregate_lease_income(
    periods: Iterable[LeasePeriodRecord],
    scope: Scope,
    year: int,
) -> LeaseIncome:
    """
    Aggregate monthly income for the year.

    Every month whose 15th falls inside a period receives that period's full
    base rent plus service charges. There is no day-level prorating: a lease
    starting on the 10th earns its whole first month, one starting on the
    20th earns nothing for that month.

    Args:
        periods: Signed lease financial periods
        scope: Resolved property scope
        year: Target calendar year

    Returns:
        LeaseIncome with 12 monthly buckets and the base-rent total
    """
    monthly = np.zeros(12, dtype=np.int64)
    base_rent_total = 0
    samples = month_sample_dates(year)

    for period in periods:
        if period.property_id not in scope.property_ids:
            continue
        if not period.overlaps_year(year):
            continue

        for month, sample in enumerate(samples):
            if not period.covers(sample):
                continue
            monthly[month] += period.base_rent_cents + period.service_charges_cents
            base_rent_total += period.base_rent_cents

    return LeaseIncome(
        monthly_income=[Cents(int(v)) for v in monthly],
        annual_base_rent_cents=Cents(base_rent_total),
    )
